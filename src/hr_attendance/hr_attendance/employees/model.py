from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Roster entry as seen by attendance: who carries which employee code.

    Note: Inactive employees stay in the roster so historical punches still resolve.
    """

    employee_id: str
    employee_code: str
    name: str
    is_active: bool = True
    department: Optional[str] = None
