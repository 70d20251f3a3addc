"""
Department sources.

The static source carries the built-in master list; the JSON source reads the
same shape from a file so deployments can swap the list without code changes.
"""

import json
import logging
import os
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..domain.errors import DepartmentSourceError
from ..domain.models import Department
from ..domain.repositories import DepartmentSource

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENTS: Tuple[Tuple[str, str], ...] = (
    ("Human Resources", "John Smith"),
    ("IT", "Dan Developer"),
    ("Accounting", "Jane Doe"),
    ("Engineering", "Marc Jones"),
)


class StaticDepartmentSource(DepartmentSource):
    """In-code master list. Every call returns fresh Department instances."""

    def __init__(self, departments: Optional[Sequence[Department]] = None):
        if departments is None:
            self._records = list(DEFAULT_DEPARTMENTS)
        else:
            self._records = [(d.name, d.manager_name) for d in departments]

    def load_departments(self) -> List[Department]:
        return [Department(name, manager) for name, manager in self._records]


class JsonDepartmentSource(DepartmentSource):
    """Reads ``[{"name": ..., "manager_name": ...}, ...]`` from a JSON file."""

    def __init__(self, path: str):
        self.path = path

    def load_departments(self) -> List[Department]:
        try:
            with open(self.path, 'r', encoding='utf-8') as fh:
                payload = json.load(fh)
        except FileNotFoundError as e:
            raise DepartmentSourceError(f"Department file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise DepartmentSourceError(f"Department file is not valid JSON: {self.path}: {e}") from e

        if not isinstance(payload, list):
            raise DepartmentSourceError(f"Department file must contain a list: {self.path}")

        departments = [self._parse_entry(entry, index) for index, entry in enumerate(payload)]
        logger.debug("Loaded %d departments from %s", len(departments), self.path)
        return departments

    def _parse_entry(self, entry: Any, index: int) -> Department:
        if not isinstance(entry, Mapping) or not isinstance(entry.get('name'), str):
            raise DepartmentSourceError(f"Entry {index} in {self.path} needs a string 'name'")
        manager = entry.get('manager_name', '')
        if not isinstance(manager, str):
            raise DepartmentSourceError(f"Entry {index} in {self.path} has a non-string 'manager_name'")
        return Department(entry['name'], manager)


def build_department_source(config: Mapping[str, Any]) -> DepartmentSource:
    """Pick the department source named by the DEPARTMENT_SOURCE setting."""
    setting = (config.get('DEPARTMENT_SOURCE') or 'static').strip()
    if setting.lower() == 'static':
        return StaticDepartmentSource()
    path = os.path.expanduser(setting)
    if not os.path.isabs(path):
        path = os.path.abspath(path)
    return JsonDepartmentSource(path)
