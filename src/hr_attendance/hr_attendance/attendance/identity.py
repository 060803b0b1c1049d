from __future__ import annotations

import re
from typing import Iterable, Optional

from ..core.constants import PLACEHOLDER_PREFIX
from ..employees.model import Employee
from .model import EmployeeIdentity

_NON_DIGITS = re.compile(r"\D")


def digits_of(raw: str) -> str:
    return _NON_DIGITS.sub("", raw or "")


def numeric_key(raw: str) -> Optional[str]:
    """'NV00007' / '00007' / ' 7 ' -> '7'; None when there are no digits."""
    digits = digits_of(raw)
    if not digits:
        return None
    return str(int(digits))


class IdentityResolver:
    """Maps device ids to roster identities for one aggregation call.

    Rebuilt from the roster on every call; never shared between requests.
    """

    def __init__(self, by_key: dict[str, EmployeeIdentity]):
        self._by_key = by_key
        self._resolved: dict[str, EmployeeIdentity] = {}

    @classmethod
    def from_roster(cls, employees: Iterable[Employee]) -> "IdentityResolver":
        by_key: dict[str, EmployeeIdentity] = {}
        secondary: dict[str, EmployeeIdentity] = {}
        for emp in employees:
            key = numeric_key(emp.employee_code)
            if key is None:
                continue
            identity = EmployeeIdentity(
                employee_id=emp.employee_id,
                display_code=emp.employee_code,
                display_name=emp.name,
            )
            # First registration wins for a duplicated code.
            by_key.setdefault(key, identity)
            digits = digits_of(emp.employee_code)
            if digits != key:
                secondary.setdefault(digits, identity)
        for digits, identity in secondary.items():
            by_key.setdefault(digits, identity)
        return cls(by_key)

    def __len__(self) -> int:
        return len(self._by_key)

    def resolve(self, device_id: str) -> EmployeeIdentity:
        cached = self._resolved.get(device_id)
        if cached is not None:
            return cached

        identity = self._lookup(device_id)
        self._resolved[device_id] = identity
        return identity

    def _lookup(self, device_id: str) -> EmployeeIdentity:
        digits = digits_of(device_id)
        key = str(int(digits)) if digits else None

        if key is not None:
            found = self._by_key.get(key) or self._by_key.get(digits)
            if found is not None:
                return found

        label = key if key is not None else (device_id or "").strip()
        return EmployeeIdentity(
            employee_id=f"{PLACEHOLDER_PREFIX}{label}",
            display_code=label,
            display_name="",
            linked=False,
        )
