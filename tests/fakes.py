from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from src.hr_attendance.hr_attendance.attendance.model import RawPunch
from src.hr_attendance.hr_attendance.common.datetime_utils import parse_instant
from src.hr_attendance.hr_attendance.core.exceptions import UpstreamUnavailable
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.settings.model import CompanySettings


@dataclass
class InMemoryEmployees:
    employees: list[Employee]
    fail: bool = False
    calls: int = 0

    def list_identities(self):
        self.calls += 1
        if self.fail:
            raise UpstreamUnavailable("roster store is down")
        return list(self.employees)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for emp in self.employees:
            if emp.employee_id == employee_id:
                return emp
        return None


@dataclass
class InMemoryPunches:
    punches: list[RawPunch]
    fail: bool = False
    last_args: Optional[tuple[datetime, datetime]] = None

    def list_between(self, start: datetime, end: datetime):
        self.last_args = (start, end)
        if self.fail:
            raise UpstreamUnavailable("attendance store is down")

        # Mirror the SQL filter, leaving unparseable rows for the aggregator to drop.
        out = []
        for p in self.punches:
            ts = parse_instant(p.timestamp)
            if ts is None or start <= ts < end:
                out.append(p)
        return out


@dataclass
class InMemorySettings:
    settings: Optional[CompanySettings] = None
    loads: int = 0
    fail: bool = False

    def load(self) -> Optional[CompanySettings]:
        self.loads += 1
        if self.fail:
            raise UpstreamUnavailable("settings store is down")
        return self.settings


@dataclass
class FixedClock:
    now: datetime
    ticks: list = field(default_factory=list)

    def __call__(self) -> datetime:
        self.ticks.append(self.now)
        return self.now
