"""Exceptions raised by the roster domain layer."""

from typing import Any


class RosterError(Exception):
    """Base class for every domain error."""


class DepartmentLookupError(RosterError, LookupError):
    """Raised when a selection key or department cannot be resolved."""
    def __init__(self, key: Any, message: str = "Unknown department selection"):
        self.key = key
        self.message = f"{message}: {key!r}"
        super().__init__(self.message)


class ReferentialIntegrityError(RosterError):
    """Raised when an employee would reference a department outside the master list."""
    def __init__(self, department: Any, message: str = "Department is not part of the master list"):
        self.department = department
        self.message = f"{message}: {department}"
        super().__init__(self.message)


class DuplicateDepartmentError(RosterError):
    """Raised when a master list contains two departments with the same name."""
    def __init__(self, name: str, message: str = "Duplicate department name"):
        self.name = name
        self.message = f"{message}: {name!r}"
        super().__init__(self.message)


class DepartmentSourceError(RosterError):
    """Raised when a department source cannot produce a master list."""
