"""
Employee page routes: the description panel, the two employee forms and the
employee table, all backed by the current session's Directory.
"""

import logging
from flask import Blueprint, render_template, redirect, url_for, flash

from ..domain.errors import RosterError
from ..forms import KeyedEmployeeForm, ValueEmployeeForm, KEYED_FORM_PREFIX, VALUE_FORM_PREFIX
from ..selection import KeyedSelectionAdapter, ValueSelectionAdapter
from ..sessions import end_session_directory, get_session_directory

logger = logging.getLogger(__name__)

main_bp = Blueprint('main', __name__)

DESCRIPTION = (
    "This demo shows how to configure a form that contains a selection component for selecting a "
    "nested property of another entity. Each Employee holds a nested Department. With the two forms "
    "on the tabs below you can add new employees to the employee table. The first form's department "
    "selector holds the Department objects themselves. The second form's selector only holds row keys "
    "and the department name, so a converter has to translate between row key and Department object. "
    "For the user both forms behave exactly the same; the difference is only visible in code."
)

TABS = (
    (VALUE_FORM_PREFIX, "Department selector backed by Department objects"),
    (KEYED_FORM_PREFIX, "Department selector backed by row keys"),
)


def _build_forms(directory, value_form=None, keyed_form=None):
    if value_form is None:
        value_form = ValueEmployeeForm(ValueSelectionAdapter(directory.departments), formdata=None)
    if keyed_form is None:
        keyed_form = KeyedEmployeeForm(KeyedSelectionAdapter(directory.departments), formdata=None)
    return value_form, keyed_form


def _render_page(directory, value_form, keyed_form, active_tab=VALUE_FORM_PREFIX, status=200):
    return render_template(
        'index.html',
        description=DESCRIPTION,
        tabs=TABS,
        active_tab=active_tab,
        value_form=value_form,
        keyed_form=keyed_form,
        employees=directory.employees,
    ), status


def _submit(form, directory, active_tab):
    if not form.validate_on_submit():
        logger.warning("Rejected %s employee submission: %s", active_tab, form.errors)
        value_form, keyed_form = _build_forms(
            directory,
            value_form=form if active_tab == VALUE_FORM_PREFIX else None,
            keyed_form=form if active_tab == KEYED_FORM_PREFIX else None,
        )
        return _render_page(directory, value_form, keyed_form, active_tab=active_tab, status=400)

    try:
        employee = directory.add_employee(
            form.first_name.data.strip(),
            form.last_name.data.strip(),
            form.selected_department(),
        )
    except RosterError as e:
        logger.warning("Employee not added: %s", e)
        flash(str(e), 'error')
        value_form, keyed_form = _build_forms(directory)
        return _render_page(directory, value_form, keyed_form, active_tab=active_tab, status=400)

    flash(f'Added {employee.full_name} to {employee.department.name}.', 'success')
    return redirect(url_for('main.index', _anchor=active_tab))


@main_bp.route('/')
def index():
    directory = get_session_directory()
    value_form, keyed_form = _build_forms(directory)
    return _render_page(directory, value_form, keyed_form)


@main_bp.route('/employees/by-value', methods=['POST'])
def add_employee_by_value():
    directory = get_session_directory()
    form = ValueEmployeeForm(ValueSelectionAdapter(directory.departments))
    return _submit(form, directory, VALUE_FORM_PREFIX)


@main_bp.route('/employees/by-key', methods=['POST'])
def add_employee_by_key():
    directory = get_session_directory()
    form = KeyedEmployeeForm(KeyedSelectionAdapter(directory.departments))
    return _submit(form, directory, KEYED_FORM_PREFIX)


@main_bp.route('/session/reset', methods=['POST'])
def reset_session():
    """Drop this session's directory; the next request starts from the seed data."""
    end_session_directory()
    flash('Session data reset.', 'info')
    return redirect(url_for('main.index'))
