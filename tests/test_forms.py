"""Tests for the two employee forms."""
import pytest

from roster.domain.errors import DepartmentLookupError
from roster.forms import KeyedEmployeeForm, ValueEmployeeForm
from roster.selection import KeyedSelectionAdapter, ValueSelectionAdapter


def _value_form(app, directory, data):
    with app.test_request_context('/', method='POST', data=data):
        form = ValueEmployeeForm(ValueSelectionAdapter(directory.departments))
        return form, form.validate()


def _keyed_form(app, directory, data):
    with app.test_request_context('/', method='POST', data=data):
        form = KeyedEmployeeForm(KeyedSelectionAdapter(directory.departments))
        return form, form.validate()


def test_value_form_yields_department_object(app, directory):
    form, valid = _value_form(app, directory, {
        'by-value-first_name': 'Anna',
        'by-value-last_name': 'Lee',
        'by-value-department': 'Engineering',
    })
    assert valid, form.errors
    assert form.selected_department() is directory.departments[3]


def test_value_form_rejects_unknown_department(app, directory):
    form, valid = _value_form(app, directory, {
        'by-value-first_name': 'Anna',
        'by-value-last_name': 'Lee',
        'by-value-department': 'Marketing',
    })
    assert not valid
    assert 'department' in form.errors
    assert form.selected_department() is None


def test_value_form_requires_names(app, directory):
    form, valid = _value_form(app, directory, {'by-value-department': 'IT'})
    assert not valid
    assert set(form.errors) == {'first_name', 'last_name'}


def test_keyed_form_translates_row_key(app, directory):
    form, valid = _keyed_form(app, directory, {
        'by-key-first_name': 'Anna',
        'by-key-last_name': 'Lee',
        'by-key-department': '4',
    })
    assert valid, form.errors
    assert form.department.data == 4
    assert form.selected_department() is directory.departments[3]


@pytest.mark.parametrize("key", ['0', '9', 'Engineering', ''])
def test_keyed_form_rejects_unassigned_key(app, directory, key):
    form, valid = _keyed_form(app, directory, {
        'by-key-first_name': 'Anna',
        'by-key-last_name': 'Lee',
        'by-key-department': key,
    })
    assert not valid
    assert 'department' in form.errors
    with pytest.raises(DepartmentLookupError):
        form.selected_department()


def test_both_forms_render_one_option_per_department(app, directory):
    with app.test_request_context('/'):
        value_form = ValueEmployeeForm(ValueSelectionAdapter(directory.departments), formdata=None)
        keyed_form = KeyedEmployeeForm(KeyedSelectionAdapter(directory.departments), formdata=None)
        value_html = value_form.department()
        keyed_html = keyed_form.department()

    assert value_html.count('<option') == 4
    assert keyed_html.count('<option') == 4
    assert 'value="Engineering"' in value_html
    assert 'Engineering (Manager: Marc Jones)' in value_html
    assert 'value="4"' in keyed_html
    assert 'name="by-value-department"' in value_html
    assert 'name="by-key-department"' in keyed_html


@pytest.mark.parametrize("key", ['0', '9'])
def test_keyed_form_reports_one_error_for_unknown_key(app, directory, key):
    form, valid = _keyed_form(app, directory, {
        'by-key-first_name': 'Anna',
        'by-key-last_name': 'Lee',
        'by-key-department': key,
    })
    assert not valid
    assert len(form.errors['department']) == 1
