from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import is_weekend
from ..core.constants import STANDARD_WORKDAY_HOURS
from .aggregator import round1, round2
from .model import AttendanceDaySummary, MonthlyTotals


def monthly_totals(
    summaries: Sequence[AttendanceDaySummary],
    *,
    year: int,
    month: int,
    working_days: int,
) -> MonthlyTotals:
    """Roll one employee's daily summaries up into month figures.

    Overtime is split by the summary's UTC date (Saturday/Sunday count as weekend)
    and converted to days against the standard workday.
    """
    present = 0.0
    weekday_ot = 0.0
    weekend_ot = 0.0
    for s in summaries:
        present += s.work_value
        if s.overtime_hours > 0:
            if is_weekend(s.work_date):
                weekend_ot += s.overtime_hours
            else:
                weekday_ot += s.overtime_hours

    weekday_days = weekday_ot / STANDARD_WORKDAY_HOURS
    weekend_days = weekend_ot / STANDARD_WORKDAY_HOURS
    overtime_days = weekday_days + weekend_days
    rate = (present / working_days * 100) if working_days > 0 else 0.0

    return MonthlyTotals(
        year=year,
        month=month,
        present_days=round2(present),
        overtime_hours=round2(weekday_ot + weekend_ot),
        weekday_overtime_hours=round2(weekday_ot),
        weekend_overtime_hours=round2(weekend_ot),
        weekday_overtime_days=round2(weekday_days),
        weekend_overtime_days=round2(weekend_days),
        overtime_days=round2(overtime_days),
        standard_present_days=round2(max(0.0, present - overtime_days)),
        working_days=int(working_days),
        attendance_rate=round1(rate),
    )
