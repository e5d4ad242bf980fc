"""
Typed DTOs shared by repositories and services.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

# The exclusive end of December must still be a valid date.
MAX_YEAR = date.max.year - 1


@dataclass(frozen=True)
class ReportingPeriod:
    """
    One calendar month.

    ``start`` is inclusive and ``end`` exclusive, so month filters become a
    half-open date range that behaves the same on every backend.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}.")
        if not 1 <= self.year <= MAX_YEAR:
            raise ValueError(f"year must be between 1 and {MAX_YEAR}, got {self.year}.")

    @classmethod
    def current(cls, today: date | None = None) -> "ReportingPeriod":
        today = today or date.today()
        return cls(year=today.year, month=today.month)

    @classmethod
    def containing(cls, day: date) -> "ReportingPeriod":
        return cls(year=day.year, month=day.month)

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        if self.month == 12:
            return date(self.year + 1, 1, 1)
        return date(self.year, self.month + 1, 1)

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}"


@dataclass(frozen=True)
class TargetValues:
    """
    The six quota figures of a target row. Missing figures default to zero.
    """

    sales_target_yearly: float = 0
    sales_target_monthly: float = 0
    call_target_monthly: int = 0
    email_target_monthly: int = 0
    whatsapp_target_monthly: int = 0
    social_target_monthly: int = 0


@dataclass(frozen=True)
class ReportInput:
    """
    Input payload for one daily report submission.
    """

    user_id: int
    date: date
    calls: int = 0
    emails: int = 0
    whatsapp: int = 0
    social: int = 0
    revenue: float = 0
    leads: int = 0
    followups: int = 0
    remarks: str | None = None
    kpi_data: dict[str, str] | None = None
