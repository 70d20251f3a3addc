from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField, SelectField
from wtforms.fields import SelectFieldBase
from wtforms.validators import DataRequired, Length, ValidationError
from wtforms.widgets import Select

from .domain.errors import DepartmentLookupError
from .selection import KeyedSelectionAdapter, ValueSelectionAdapter

VALUE_FORM_PREFIX = 'by-value'
KEYED_FORM_PREFIX = 'by-key'


class DepartmentSelectField(SelectFieldBase):
    """Select field whose choices are Department objects.

    The rendered option value is the department's identity key; on submit it
    is mapped back to the Department object the adapter holds, so ``data`` is
    always a master list instance or None.
    """
    widget = Select()

    def __init__(self, label=None, validators=None, adapter=None, **kwargs):
        super(DepartmentSelectField, self).__init__(label, validators, **kwargs)
        self.adapter = adapter
        self._data = None
        self._formdata = None

    def _get_data(self):
        if self._formdata is not None and self.adapter is not None:
            for department in self.adapter.rows:
                if self.adapter.token_for(department) == self._formdata:
                    self._set_data(department)
                    break
        return self._data

    def _set_data(self, data):
        self._data = data
        self._formdata = None

    data = property(_get_data, _set_data)

    def iter_choices(self):
        if self.adapter is None:
            return
        selected = self.data
        for department in self.adapter.rows:
            yield (self.adapter.token_for(department), str(department), department == selected, {})

    def process_formdata(self, valuelist):
        if valuelist:
            self._data = None
            self._formdata = valuelist[0]

    def pre_validate(self, form):
        data = self.data
        if self.adapter is None or data is None:
            raise ValidationError(self.gettext('Not a valid choice.'))
        if not any(data is department for department in self.adapter.rows):
            raise ValidationError(self.gettext('Not a valid choice.'))


class _EmployeeFormBase(FlaskForm):
    first_name = StringField('First Name', validators=[
        DataRequired(message='First name is required'),
        Length(max=100, message='First name cannot exceed 100 characters')
    ], render_kw={'class': 'form-control'})
    last_name = StringField('Last Name', validators=[
        DataRequired(message='Last name is required'),
        Length(max=100, message='Last name cannot exceed 100 characters')
    ], render_kw={'class': 'form-control'})
    submit = SubmitField('Add Employee', render_kw={'class': 'btn btn-primary'})


class ValueEmployeeForm(_EmployeeFormBase):
    """Employee form whose department selector holds Department objects."""
    department = DepartmentSelectField('Department', render_kw={'class': 'form-select'})

    def __init__(self, adapter: ValueSelectionAdapter, *args, **kwargs):
        kwargs.setdefault('prefix', VALUE_FORM_PREFIX)
        super(ValueEmployeeForm, self).__init__(*args, **kwargs)
        self.adapter = adapter
        self.department.adapter = adapter

    def selected_department(self):
        return self.department.data


class KeyedEmployeeForm(_EmployeeFormBase):
    """Employee form whose department selector holds surrogate row keys."""
    department = SelectField('Department', choices=[], coerce=int,
                             render_kw={'class': 'form-select'})

    def __init__(self, adapter: KeyedSelectionAdapter, *args, **kwargs):
        kwargs.setdefault('prefix', KEYED_FORM_PREFIX)
        super(KeyedEmployeeForm, self).__init__(*args, **kwargs)
        self.adapter = adapter
        self.department.choices = adapter.choices()  # type: ignore

    def validate_department(self, department):
        # SelectField already reported a key outside the choices
        if department.errors:
            return
        try:
            self.adapter.resolve(department.data)
        except DepartmentLookupError:
            raise ValidationError('Please select a department.')

    def selected_department(self):
        """Translate the chosen row key back to its Department."""
        return self.adapter.resolve(self.department.data)
