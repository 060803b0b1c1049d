from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from ..common.datetime_utils import format_instant


@dataclass(frozen=True)
class RawPunch:
    """Row as delivered by the device log; the timestamp is not yet trusted."""

    device_id: str
    timestamp: Any


@dataclass(frozen=True)
class PunchEvent:
    """Validated punch: device id plus an aware UTC instant."""

    device_id: str
    timestamp: datetime


@dataclass(frozen=True)
class EmployeeIdentity:
    employee_id: str
    display_code: str
    display_name: str
    linked: bool = True


@dataclass(frozen=True)
class AttendanceDaySummary:
    """Derived read-model: one employee, one UTC calendar day. Never stored."""

    employee_id: str
    employee_code: str
    employee_name: str
    linked: bool
    work_date: date
    check_in: datetime
    check_out: datetime
    working_hours: float
    work_value: float
    overtime_hours: float

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_code": self.employee_code,
            "employee_name": self.employee_name,
            "linked": self.linked,
            "date": self.work_date.isoformat(),
            "check_in": format_instant(self.check_in),
            "check_out": format_instant(self.check_out),
            "working_hours": self.working_hours,
            "work_value": self.work_value,
            "overtime_hours": self.overtime_hours,
        }


@dataclass(frozen=True)
class MonthlyTotals:
    year: int
    month: int
    present_days: float
    overtime_hours: float
    weekday_overtime_hours: float
    weekend_overtime_hours: float
    weekday_overtime_days: float
    weekend_overtime_days: float
    overtime_days: float
    standard_present_days: float
    working_days: int
    attendance_rate: float

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "present_days": self.present_days,
            "overtime_hours": self.overtime_hours,
            "weekday_overtime_hours": self.weekday_overtime_hours,
            "weekend_overtime_hours": self.weekend_overtime_hours,
            "weekday_overtime_days": self.weekday_overtime_days,
            "weekend_overtime_days": self.weekend_overtime_days,
            "overtime_days": self.overtime_days,
            "standard_present_days": self.standard_present_days,
            "working_days": self.working_days,
            "attendance_rate": self.attendance_rate,
        }
