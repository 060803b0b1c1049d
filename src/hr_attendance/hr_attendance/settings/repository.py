from __future__ import annotations

from typing import Optional, Protocol

from .model import CompanySettings


class SettingsRepository(Protocol):
    def load(self) -> Optional[CompanySettings]:
        """The single company settings row, or None when it was never saved."""
        raise NotImplementedError
