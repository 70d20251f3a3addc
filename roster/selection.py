"""
Selection adapters backing the department dropdown.

Both adapters expose one selectable row per department of a Directory's master
list and must agree on which Department a choice stands for:

* ValueSelectionAdapter keeps the Department objects themselves as rows.
* KeyedSelectionAdapter keeps a surrogate integer key plus the cached name and
  translates keys back to the Department each row was seeded with.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .domain.errors import DepartmentLookupError
from .domain.models import Department


class ValueSelectionAdapter:
    """By-value data source: selecting a row yields the Department itself."""

    def __init__(self, departments: Iterable[Department]):
        self._rows: Tuple[Department, ...] = tuple(departments)

    @property
    def rows(self) -> Tuple[Department, ...]:
        return self._rows

    def token_for(self, department: Department) -> str:
        """HTML option value for ``department`` (its identity key)."""
        return department.name

    def select(self, department: Any) -> Department:
        for row in self._rows:
            if row == department:
                return row
        raise DepartmentLookupError(department)

    def select_by_name(self, name: str) -> Department:
        for row in self._rows:
            if row.name == name:
                return row
        raise DepartmentLookupError(name)

    def choices(self) -> List[Tuple[str, str]]:
        return [(self.token_for(row), str(row)) for row in self._rows]


@dataclass(frozen=True)
class SelectionRow:
    key: int
    name: str
    department: Department


class KeyedSelectionAdapter:
    """By-key data source with an explicit key <-> Department mapping."""

    def __init__(self, departments: Iterable[Department], first_key: int = 1):
        self._rows: Tuple[SelectionRow, ...] = tuple(
            SelectionRow(key, department.name, department)
            for key, department in enumerate(departments, start=first_key)
        )
        self._by_key: Dict[int, SelectionRow] = {row.key: row for row in self._rows}
        self._by_name: Dict[str, SelectionRow] = {row.department.name: row for row in self._rows}

    @property
    def rows(self) -> Tuple[SelectionRow, ...]:
        return self._rows

    @staticmethod
    def _normalize_key(key: Any) -> Optional[int]:
        # bool is an int subclass and True would hit row 1
        if isinstance(key, bool):
            return None
        if isinstance(key, int):
            return key
        if isinstance(key, str):
            stripped = key.strip()
            # isdigit() is also true for '²' or '٣'; only ASCII keys are ever assigned
            if stripped.isascii() and stripped.lstrip('-').isdigit():
                return int(stripped)
        return None

    def resolve(self, key: Any) -> Department:
        """Department seeded under ``key``; unassigned keys never get a default."""
        row = self._by_key.get(self._normalize_key(key))
        if row is None:
            raise DepartmentLookupError(key, "Unknown department row key")
        return row.department

    def key_of(self, department: Department) -> int:
        """Row key originally assigned to ``department``."""
        row = self._by_name.get(getattr(department, 'name', None))
        if row is None:
            raise DepartmentLookupError(department)
        return row.key

    def select_by_name(self, name: str) -> Department:
        row = self._by_name.get(name)
        if row is None:
            raise DepartmentLookupError(name)
        return self.resolve(row.key)

    def choices(self) -> List[Tuple[int, str]]:
        return [(row.key, row.name) for row in self._rows]
