from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.cache import TtlCache
from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_SETTINGS_CACHE_SECONDS
from .model import CompanySettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Company settings behind an instance-owned TTL cache."""

    def __init__(
        self,
        settings: SettingsRepository,
        *,
        ttl_seconds: int = DEFAULT_SETTINGS_CACHE_SECONDS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._settings = settings
        self._cache: TtlCache[CompanySettings] = TtlCache(ttl=timedelta(seconds=int(ttl_seconds)))
        self._clock = clock or now_utc

    def _load(self) -> CompanySettings:
        loaded = self._settings.load()
        if loaded is None:
            logger.warning("No company_settings row found, using defaults")
            return CompanySettings()
        return loaded

    def get_settings(self) -> CompanySettings:
        return self._cache.get_or_refresh(self._load, self._clock())

    def refresh(self) -> CompanySettings:
        return self._cache.refresh(self._load, self._clock())

    def clear_cache(self) -> None:
        self._cache.clear()

    def working_days_per_month(self) -> int:
        return self.get_settings().working_days_per_month
