from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attendance.mysql_punch_repository import MySQLPunchEventRepository
from .attendance.repository import PunchEventRepository
from .attendance.service import AttendanceSummaryService
from .auth.identity_provider import IdentityProvider, StaticTokenIdentityProvider, parse_token_list
from .core.constants import (
    DEFAULT_ATTENDANCE_DEVICE_COLUMN,
    DEFAULT_ATTENDANCE_TABLE,
    DEFAULT_ATTENDANCE_TIME_COLUMN,
    DEFAULT_SETTINGS_CACHE_SECONDS,
)
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    punches_repo: PunchEventRepository
    settings_repo: SettingsRepository

    identity_provider: IdentityProvider
    settings_service: SettingsService
    attendance_service: AttendanceSummaryService


def assemble(
    *,
    employees_repo: EmployeeRepository,
    punches_repo: PunchEventRepository,
    settings_repo: SettingsRepository,
    identity_provider: IdentityProvider,
    settings_cache_seconds: int = DEFAULT_SETTINGS_CACHE_SECONDS,
) -> Container:
    """Wire services on top of already-built repositories (also used by tests)."""
    settings_service = SettingsService(settings_repo, ttl_seconds=settings_cache_seconds)
    attendance_service = AttendanceSummaryService(punches_repo, employees_repo, settings_service)

    return Container(
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        settings_repo=settings_repo,
        identity_provider=identity_provider,
        settings_service=settings_service,
        attendance_service=attendance_service,
    )


def build_container(settings: Any) -> Container:
    """Build the MySQL-backed container from a settings module."""
    hr_db = DatabaseConnection(DBConfig.from_dict(getattr(settings, "HR_DB_CONFIG")))

    attendance_db_config: Mapping[str, Any] = dict(getattr(settings, "ATTENDANCE_DB_CONFIG"))
    attendance_db = DatabaseConnection(DBConfig.from_dict({"time_zone": "+00:00", **attendance_db_config}))

    punches_repo = MySQLPunchEventRepository(
        attendance_db,
        table=getattr(settings, "ATTENDANCE_TABLE", DEFAULT_ATTENDANCE_TABLE),
        device_column=getattr(settings, "ATTENDANCE_DEVICE_COLUMN", DEFAULT_ATTENDANCE_DEVICE_COLUMN),
        time_column=getattr(settings, "ATTENDANCE_TIME_COLUMN", DEFAULT_ATTENDANCE_TIME_COLUMN),
    )

    return assemble(
        employees_repo=MySQLEmployeeRepository(hr_db),
        punches_repo=punches_repo,
        settings_repo=MySQLSettingsRepository(hr_db),
        identity_provider=StaticTokenIdentityProvider(parse_token_list(getattr(settings, "API_TOKENS", ""))),
        settings_cache_seconds=int(getattr(settings, "SETTINGS_CACHE_SECONDS", DEFAULT_SETTINGS_CACHE_SECONDS)),
    )
