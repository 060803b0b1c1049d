from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import RawPunch


class PunchEventRepository(Protocol):
    """Read-only access to the clocking-device log."""

    def list_between(self, start: datetime, end: datetime) -> Sequence[RawPunch]:
        """Punches with start <= timestamp < end, ordered by timestamp.

        The ordering is a convenience; callers must not rely on it.
        """
        raise NotImplementedError
