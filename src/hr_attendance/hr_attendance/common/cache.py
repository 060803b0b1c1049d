from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class TtlCache(Generic[T]):
    """A single cached value with an explicit expiry.

    Owned by the service that needs it; nothing here is process-global.
    """

    ttl: timedelta
    value: Optional[T] = None
    expires_at: Optional[datetime] = None

    def get(self, now: datetime) -> Optional[T]:
        if self.expires_at is None or now >= self.expires_at:
            return None
        return self.value

    def refresh(self, loader: Callable[[], T], now: datetime) -> T:
        value = loader()
        self.value = value
        self.expires_at = now + self.ttl
        return value

    def get_or_refresh(self, loader: Callable[[], T], now: datetime) -> T:
        cached = self.get(now)
        if cached is not None:
            return cached
        return self.refresh(loader, now)

    def clear(self) -> None:
        self.value = None
        self.expires_at = None
