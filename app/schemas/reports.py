"""
app/schemas/reports.py

Schemas for daily report submission and monthly summaries.
"""

from __future__ import annotations

import datetime as dt
import json
from typing import Any

from pydantic import BaseModel, Field, field_validator

from db.base import INT_COLUMN_MAX, INT_COLUMN_MIN
from db.repositories.types import ReportInput


def _kpi_text(item: Any) -> str:
    """
    Text form of one KPI value, spelled the way JSON spells it
    (``true``, ``3``, ``2.5``). Whole floats drop their fraction.
    """
    if item is None:
        return ""
    if isinstance(item, str):
        return item
    if isinstance(item, float) and item.is_integer():
        return json.dumps(int(item))
    return json.dumps(item)


class ReportPayload(BaseModel):
    """
    One day's activity. ``date`` defaults to today.

    ``kpi_data`` maps KPI names to whatever the employee typed; scalar
    values are stored as strings.
    """

    date: dt.date = Field(default_factory=dt.date.today)
    calls: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    emails: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    whatsapp: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    social: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    revenue: float = Field(default=0, allow_inf_nan=False)
    leads: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    followups: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    remarks: str | None = None
    kpi_data: dict[str, str] | None = None

    @field_validator("kpi_data", mode="before")
    @classmethod
    def _stringify_kpi_values(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        # Nested structures are left alone so validation rejects them.
        return {
            str(key): item if isinstance(item, (dict, list)) else _kpi_text(item)
            for key, item in value.items()
        }

    def to_input(self, user_id: int) -> ReportInput:
        return ReportInput(
            user_id=user_id,
            date=self.date,
            calls=self.calls,
            emails=self.emails,
            whatsapp=self.whatsapp,
            social=self.social,
            revenue=self.revenue,
            leads=self.leads,
            followups=self.followups,
            remarks=self.remarks,
            kpi_data=self.kpi_data,
        )


class ReportCreateRequest(ReportPayload):
    user_id: int = Field(..., ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)


class ReportResponse(BaseModel):
    id: int
    user_id: int
    date: dt.date
    calls: int
    emails: int
    whatsapp: int
    social: int
    revenue: float
    leads: int
    followups: int
    remarks: str | None = None
    kpi_data: dict[str, str] | None = None

    model_config = {"from_attributes": True}


class MetricProgressResponse(BaseModel):
    metric: str
    achieved: float
    target: float
    progress: float


class MonthlySummaryResponse(BaseModel):
    user_id: int
    year: int
    month: int
    report_count: int = Field(..., ge=0)
    metrics: list[MetricProgressResponse] = Field(default_factory=list)
