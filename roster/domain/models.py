"""
Domain models for the employee roster.

Department is a value-like record identified by its name only; Employee holds
a reference to one of the Departments of a Directory's master list.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(eq=False)
class Department:
    """Department domain model."""
    name: str = ""
    manager_name: str = ""

    # Identity is the name alone so a manager change never breaks references.
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Department):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"{self.name} (Manager: {self.manager_name})"

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'manager_name': self.manager_name}


@dataclass(eq=False)
class Employee:
    """Employee domain model.

    Equality is object identity: two employees with the same names and
    department are still two people.
    """
    first_name: str
    last_name: str
    department: Department

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'first_name': self.first_name,
            'last_name': self.last_name,
            'department': self.department.to_dict() if self.department else None,
        }
