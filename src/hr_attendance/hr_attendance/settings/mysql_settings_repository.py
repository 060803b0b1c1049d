from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_OVERTIME_RATE, DEFAULT_WORKING_DAYS_PER_MONTH
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import CompanySettings
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> Optional[CompanySettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT company_name, working_days_per_month, overtime_rate
                FROM company_settings
                ORDER BY id ASC
                LIMIT 1
                """
            )
            row = fetchone(cur)
            if not row:
                return None
            return CompanySettings(
                company_name=row.get("company_name") or "",
                working_days_per_month=int(row.get("working_days_per_month") or DEFAULT_WORKING_DAYS_PER_MONTH),
                overtime_rate=int(row.get("overtime_rate") or DEFAULT_OVERTIME_RATE),
            )
