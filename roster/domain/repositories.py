"""
Source interfaces for the domain layer.

The master department list is typically loaded from a database; the Directory
only depends on this contract so the backing store can be swapped.
"""

from abc import ABC, abstractmethod
from typing import List

from .models import Department


class DepartmentSource(ABC):
    """Provider of the master department list."""

    @abstractmethod
    def load_departments(self) -> List[Department]:
        """Return the departments in display order."""
        pass
