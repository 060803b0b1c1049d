"""Attendance aggregation: raw device punches -> per-employee daily summaries.

Every punch is resolved to an employee (or a ``finger:<id>`` placeholder),
bucketed by (employee, UTC calendar day), and the earliest/latest punch of
each bucket become check-in/check-out. Worked time is then normalized against
a standard 8-hour day.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import parse_instant
from ..core.constants import STANDARD_WORKDAY_HOURS
from ..core.exceptions import MalformedEvent
from ..employees.model import Employee
from .identity import IdentityResolver
from .model import AttendanceDaySummary, EmployeeIdentity, PunchEvent, RawPunch

logger = logging.getLogger(__name__)

_ONE_PLACE = Decimal("0.1")
_TWO_PLACES = Decimal("0.01")


def round2(value: float) -> float:
    """Half-up rounding to 2 decimals (float round() is half-even)."""
    return float(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def round1(value: float) -> float:
    return float(Decimal(repr(value)).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP))


def to_punch_event(raw: RawPunch) -> PunchEvent:
    timestamp = parse_instant(raw.timestamp)
    if timestamp is None:
        raise MalformedEvent(f"Unparseable timestamp {raw.timestamp!r} for device {raw.device_id!r}")
    return PunchEvent(device_id=str(raw.device_id), timestamp=timestamp)


@dataclass
class _DayAccumulator:
    identity: EmployeeIdentity
    work_date: date
    first: datetime
    last: datetime

    def add(self, ts: datetime) -> None:
        if ts < self.first:
            self.first = ts
        if ts > self.last:
            self.last = ts


def summarize_day(identity: EmployeeIdentity, work_date: date, check_in: datetime, check_out: datetime) -> AttendanceDaySummary:
    hours = max(0.0, (check_out - check_in).total_seconds() / 3600)
    working_hours = round2(hours)
    work_value = round2(min(1.0, max(0.0, working_hours / STANDARD_WORKDAY_HOURS)))
    overtime_hours = round2(max(0.0, working_hours - STANDARD_WORKDAY_HOURS))

    return AttendanceDaySummary(
        employee_id=identity.employee_id,
        employee_code=identity.display_code,
        employee_name=identity.display_name,
        linked=identity.linked,
        work_date=work_date,
        check_in=check_in,
        check_out=check_out,
        working_hours=working_hours,
        work_value=work_value,
        overtime_hours=overtime_hours,
    )


def aggregate_punches(
    raw_events: Iterable[RawPunch],
    roster: Iterable[Employee],
    *,
    window: Optional[tuple[datetime, datetime]] = None,
) -> list[AttendanceDaySummary]:
    """Group punches into daily summaries sorted by (date, employee_id).

    Events whose timestamp cannot be parsed, or that fall outside the
    half-open ``window``, are skipped. Input order does not matter.
    """
    resolver = IdentityResolver.from_roster(roster)
    buckets: dict[tuple[str, date], _DayAccumulator] = {}
    malformed = 0
    outside = 0

    for raw in raw_events:
        try:
            event = to_punch_event(raw)
        except MalformedEvent as exc:
            malformed += 1
            logger.debug("Skipping punch: %s", exc)
            continue

        if window is not None and not (window[0] <= event.timestamp < window[1]):
            outside += 1
            continue

        identity = resolver.resolve(event.device_id)
        work_date = event.timestamp.date()
        key = (identity.employee_id, work_date)

        acc = buckets.get(key)
        if acc is None:
            buckets[key] = _DayAccumulator(identity, work_date, event.timestamp, event.timestamp)
        else:
            acc.add(event.timestamp)

    summaries = [summarize_day(a.identity, a.work_date, a.first, a.last) for a in buckets.values()]
    summaries.sort(key=lambda s: (s.work_date, s.employee_id))

    logger.debug(
        "Aggregated %d summaries (roster keys=%d, malformed=%d, outside window=%d)",
        len(summaries), len(resolver), malformed, outside,
    )
    return summaries


def summaries_for_employee(summaries: Sequence[AttendanceDaySummary], employee_id: str) -> list[AttendanceDaySummary]:
    return [s for s in summaries if s.employee_id == employee_id]
