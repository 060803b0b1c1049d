from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.constants import (
    DEFAULT_ATTENDANCE_DEVICE_COLUMN,
    DEFAULT_ATTENDANCE_TABLE,
    DEFAULT_ATTENDANCE_TIME_COLUMN,
)
from ..common.datetime_utils import as_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, quote_identifier
from .model import RawPunch
from .repository import PunchEventRepository


class MySQLPunchEventRepository(PunchEventRepository):
    """Reads the device log table written by the clocking machine's sync tool."""

    def __init__(
        self,
        conn_factory: DatabaseConnection,
        *,
        table: str = DEFAULT_ATTENDANCE_TABLE,
        device_column: str = DEFAULT_ATTENDANCE_DEVICE_COLUMN,
        time_column: str = DEFAULT_ATTENDANCE_TIME_COLUMN,
    ):
        self._conn_factory = conn_factory
        self._table = quote_identifier(table)
        self._device_col = quote_identifier(device_column)
        self._time_col = quote_identifier(time_column)

    def list_between(self, start: datetime, end: datetime) -> Sequence[RawPunch]:
        # Session runs at UTC, so naive UTC bounds compare correctly with DATETIME columns.
        start_naive = as_utc(start).replace(tzinfo=None)
        end_naive = as_utc(end).replace(tzinfo=None)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {self._device_col} AS device_id, {self._time_col} AS punched_at
                FROM {self._table}
                WHERE {self._time_col} >= %s AND {self._time_col} < %s
                ORDER BY {self._time_col} ASC
                """,
                (start_naive, end_naive),
            )
            return [
                RawPunch(device_id=str(r.get("device_id") or ""), timestamp=r.get("punched_at"))
                for r in fetchall(cur)
            ]
