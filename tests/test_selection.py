"""Tests for the by-value and by-key department selection adapters."""
import pytest

from roster.domain.errors import DepartmentLookupError
from roster.domain.models import Department
from roster.selection import KeyedSelectionAdapter, ValueSelectionAdapter


def test_keyed_round_trip_for_every_department(directory):
    adapter = KeyedSelectionAdapter(directory.departments)
    for department in directory.departments:
        assert adapter.resolve(adapter.key_of(department)) is department
    for row in adapter.rows:
        assert adapter.key_of(adapter.resolve(row.key)) == row.key


def test_keyed_rows_cache_name_and_reference(directory):
    adapter = KeyedSelectionAdapter(directory.departments)
    assert [row.key for row in adapter.rows] == [1, 2, 3, 4]
    for row, department in zip(adapter.rows, directory.departments):
        assert row.name == department.name
        assert row.department is department


@pytest.mark.parametrize("key", [0, 5, -1, 99, "abc", "", None, 1.5, True, "²", "①", "٣"])
def test_keyed_resolve_unassigned_key_fails(directory, key):
    adapter = KeyedSelectionAdapter(directory.departments)
    with pytest.raises(DepartmentLookupError) as exc_info:
        adapter.resolve(key)
    assert exc_info.value.key == key


def test_keyed_lookup_failure_is_a_lookup_error(directory):
    adapter = KeyedSelectionAdapter(directory.departments)
    with pytest.raises(LookupError):
        adapter.resolve(42)


def test_keyed_resolve_accepts_numeric_strings(directory):
    adapter = KeyedSelectionAdapter(directory.departments)
    assert adapter.resolve("4") is directory.departments[3]
    assert adapter.resolve(" 2 ") is directory.departments[1]


def test_keyed_key_of_unknown_department_fails(directory):
    adapter = KeyedSelectionAdapter(directory.departments)
    with pytest.raises(DepartmentLookupError):
        adapter.key_of(Department("Marketing", "Nobody"))


def test_keyed_key_of_value_equal_copy(directory):
    adapter = KeyedSelectionAdapter(directory.departments)
    assert adapter.key_of(Department("Engineering", "someone else")) == 4


def test_keyed_choices(directory):
    adapter = KeyedSelectionAdapter(directory.departments)
    assert adapter.choices() == [
        (1, "Human Resources"), (2, "IT"), (3, "Accounting"), (4, "Engineering")
    ]


def test_value_adapter_rows_are_the_departments(directory):
    adapter = ValueSelectionAdapter(directory.departments)
    assert all(row is dep for row, dep in zip(adapter.rows, directory.departments))
    assert adapter.choices()[3] == ("Engineering", "Engineering (Manager: Marc Jones)")


def test_value_adapter_select(directory):
    adapter = ValueSelectionAdapter(directory.departments)
    engineering = directory.departments[3]
    assert adapter.select(Department("Engineering", "Marc Jones")) is engineering
    assert adapter.select_by_name("Engineering") is engineering
    with pytest.raises(DepartmentLookupError):
        adapter.select(Department("Marketing", "Nobody"))
    with pytest.raises(DepartmentLookupError):
        adapter.select_by_name("Marketing")


def test_both_adapters_offer_one_row_per_department(directory):
    by_value = ValueSelectionAdapter(directory.departments)
    by_key = KeyedSelectionAdapter(directory.departments)
    assert len(by_value.rows) == len(by_key.rows) == len(directory.departments)
    for department in directory.departments:
        assert sum(1 for row in by_value.rows if row == department) == 1
        assert sum(1 for row in by_key.rows if row.department == department) == 1


def test_both_adapters_agree_on_selection(directory):
    by_value = ValueSelectionAdapter(directory.departments)
    by_key = KeyedSelectionAdapter(directory.departments)
    for department in directory.departments:
        assert by_value.select_by_name(department.name) is by_key.select_by_name(department.name)


def test_two_form_scenario(directory):
    by_value = ValueSelectionAdapter(directory.departments)
    by_key = KeyedSelectionAdapter(directory.departments)

    selected = by_value.select(Department("Engineering", "Marc Jones"))
    directory.add_employee("Anna", "Lee", selected)
    employees = directory.employees
    assert len(employees) == 3
    assert employees[2].department.name == "Engineering"

    engineering_key = next(row.key for row in by_key.rows if row.name == "Engineering")
    keyed = by_key.resolve(engineering_key)
    assert keyed == selected
    directory.add_employee("Anna", "Lee", keyed)
    employees = directory.employees
    assert len(employees) == 4
    assert employees[3].department == employees[2].department
    assert employees[3].full_name == employees[2].full_name
    assert employees[3] is not employees[2]
