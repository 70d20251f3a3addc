"""
Directory aggregate.

A Directory owns the ordered, duplicate-free master list of departments and
the insertion-ordered employee collection for one user session. Both employee
forms and the employee table read from and write to the same instance.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .errors import DuplicateDepartmentError, ReferentialIntegrityError
from .models import Department, Employee
from .repositories import DepartmentSource

logger = logging.getLogger(__name__)

# (first_name, last_name, index into the master list)
SEED_EMPLOYEES: Tuple[Tuple[str, str, int], ...] = (
    ("Mary", "Poppins", 0),
    ("Max", "Cromwell", 1),
)


class Directory:
    """Master department list plus the employee collection of one session."""

    def __init__(self, departments: Iterable[Department], employees: Iterable[Employee] = ()):
        master: List[Department] = []
        seen = set()
        for department in departments:
            # Same name means same department, whatever the manager says
            if department.name in seen:
                raise DuplicateDepartmentError(department.name)
            seen.add(department.name)
            master.append(department)
        self._departments: Tuple[Department, ...] = tuple(master)
        self._employees: List[Employee] = []
        for employee in employees:
            self.add_employee(employee.first_name, employee.last_name, employee.department)

    @classmethod
    def from_source(cls, source: DepartmentSource, seed_employees: bool = True) -> "Directory":
        """Build a directory from a department source, optionally with the demo employees."""
        directory = cls(source.load_departments())
        if seed_employees:
            for first_name, last_name, index in SEED_EMPLOYEES:
                if index < len(directory.departments):
                    directory.add_employee(first_name, last_name, directory.departments[index])
        logger.debug(
            "Directory seeded with %d departments and %d employees",
            len(directory.departments), len(directory.employees),
        )
        return directory

    @property
    def departments(self) -> Tuple[Department, ...]:
        return self._departments

    @property
    def employees(self) -> List[Employee]:
        return list(self._employees)

    def find_department(self, name: str) -> Optional[Department]:
        for department in self._departments:
            if department.name == name:
                return department
        return None

    def contains(self, department: Optional[Department]) -> bool:
        if department is None:
            return False
        return self.find_department(department.name) is not None

    def add_employee(self, first_name: str, last_name: str, department: Optional[Department]) -> Employee:
        """Append a new employee working in ``department``.

        The employee references the master list instance, so a value-equal
        copy handed in by a caller never ends up stored.
        """
        if not isinstance(department, Department):
            raise ReferentialIntegrityError(department)
        master = self.find_department(department.name)
        if master is None:
            raise ReferentialIntegrityError(department)
        employee = Employee(first_name, last_name, master)
        self._employees.append(employee)
        logger.info("Added employee %s to %s", employee.full_name, master.name)
        return employee

    def __len__(self) -> int:
        return len(self._employees)

    def __repr__(self) -> str:
        return f"<Directory departments={len(self._departments)} employees={len(self._employees)}>"
