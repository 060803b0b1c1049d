from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only roster interface used by the attendance services."""

    def list_identities(self) -> Sequence[Employee]:
        """Every employee ever issued a code, regardless of status."""
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError
