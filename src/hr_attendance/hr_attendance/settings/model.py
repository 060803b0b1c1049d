from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_OVERTIME_RATE, DEFAULT_WORKING_DAYS_PER_MONTH


@dataclass(frozen=True)
class CompanySettings:
    company_name: str = ""
    working_days_per_month: int = DEFAULT_WORKING_DAYS_PER_MONTH
    overtime_rate: int = DEFAULT_OVERTIME_RATE
