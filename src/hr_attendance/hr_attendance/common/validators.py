from __future__ import annotations

from datetime import MAXYEAR, date
from typing import Any, Optional

from ..core.exceptions import InvalidPeriod


def _as_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise InvalidPeriod(f"{field_name} must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidPeriod(f"{field_name} must be a number")


def resolve_period(month: Optional[Any], year: Optional[Any], *, today: date) -> tuple[int, int]:
    """Validate an optional (month, year) pair, defaulting to ``today``'s month.

    Empty strings count as missing so query strings like ``?month=`` fall back
    to the current period.
    """
    if month is None or (isinstance(month, str) and not month.strip()):
        month_num = today.month
    else:
        month_num = _as_int(month, "month")

    if year is None or (isinstance(year, str) and not year.strip()):
        year_num = today.year
    else:
        year_num = _as_int(year, "year")

    if not 1 <= month_num <= 12:
        raise InvalidPeriod("month must be between 1 and 12")
    # The window end is the first day of the next month, so the last year is excluded.
    if not 1 <= year_num < MAXYEAR:
        raise InvalidPeriod(f"year must be between 1 and {MAXYEAR - 1}")
    return year_num, month_num
