from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import month_window, now_utc
from ..common.validators import resolve_period
from ..core.constants import DEFAULT_WORKING_DAYS_PER_MONTH
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..settings.service import SettingsService
from .aggregator import aggregate_punches, summaries_for_employee
from .model import AttendanceDaySummary, MonthlyTotals
from .repository import PunchEventRepository
from .totals import monthly_totals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeMonthReport:
    employee_id: str
    employee_code: str
    employee_name: str
    records: list[AttendanceDaySummary]
    totals: MonthlyTotals

    def to_dict(self) -> dict:
        return {
            "employee": {
                "id": self.employee_id,
                "employee_code": self.employee_code,
                "name": self.employee_name,
            },
            "attendance_records": [r.to_dict() for r in self.records],
            "summary": self.totals.to_dict(),
        }


class AttendanceSummaryService:
    """Use case: monthly attendance computed from the device punch log.

    Nothing is written; each call reads the roster and the month's punches
    and recomputes the summaries from scratch.
    """

    def __init__(
        self,
        punches: PunchEventRepository,
        employees: EmployeeRepository,
        settings: Optional[SettingsService] = None,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._settings = settings
        self._clock = clock or now_utc

    def summarize_month(self, month: Any = None, year: Any = None) -> list[AttendanceDaySummary]:
        year_num, month_num = resolve_period(month, year, today=self._clock().date())
        start, end = month_window(year_num, month_num)

        roster = self._employees.list_identities()
        events = self._punches.list_between(start, end)
        logger.debug("Summarizing %04d-%02d: %d punches, %d employees", year_num, month_num, len(events), len(roster))

        return aggregate_punches(events, roster, window=(start, end))

    def employee_month(self, employee_id: str, month: Any = None, year: Any = None) -> EmployeeMonthReport:
        year_num, month_num = resolve_period(month, year, today=self._clock().date())

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        records = summaries_for_employee(self.summarize_month(month_num, year_num), employee.employee_id)
        working_days = self._settings.working_days_per_month() if self._settings else DEFAULT_WORKING_DAYS_PER_MONTH
        totals = monthly_totals(records, year=year_num, month=month_num, working_days=working_days)

        return EmployeeMonthReport(
            employee_id=employee.employee_id,
            employee_code=employee.employee_code,
            employee_name=employee.name,
            records=records,
            totals=totals,
        )
