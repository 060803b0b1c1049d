from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(value: Any) -> Optional[datetime]:
    """Parse a driver/JSON timestamp into an aware UTC datetime.

    Accepts datetime objects and ISO-8601 strings (a trailing ``Z`` is allowed).
    Returns None when the value cannot be interpreted or has no UTC equivalent
    (e.g. year 1 with a positive offset).
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    try:
        return as_utc(parsed)
    except (ValueError, OverflowError):
        return None


def month_window(year: int, month: int) -> tuple[datetime, datetime]:
    """Half-open UTC interval [first of month, first of next month)."""
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end


def format_instant(value: datetime) -> str:
    return as_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5
