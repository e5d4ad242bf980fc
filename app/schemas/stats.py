"""
app/schemas/stats.py

Response schema for the admin statistics endpoint.

Top-level keys keep the camelCase names the dashboard consumes
(``teamStats``, ``teamTargets``, ``individualPerformance``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TeamStatsResponse(BaseModel):
    total_calls: int = 0
    total_emails: int = 0
    total_whatsapp: int = 0
    total_social: int = 0
    total_leads: int = 0
    total_followups: int = 0
    total_revenue: float = 0.0

    model_config = ConfigDict(from_attributes=True)


class TeamTargetsResponse(BaseModel):
    total_sales_target: float = 0.0
    total_call_target: int = 0
    total_email_target: int = 0
    total_whatsapp_target: int = 0
    total_social_target: int = 0
    total_yearly_sales_target: float = 0.0

    model_config = ConfigDict(from_attributes=True)


class EmployeePerformanceResponse(BaseModel):
    user_id: int
    name: str
    designation: str | None = None
    achieved_revenue: float
    target_revenue: float
    achieved_calls: int
    target_calls: int
    revenue_progress: float

    model_config = ConfigDict(from_attributes=True)


class AdminStatsResponse(BaseModel):
    year: int
    month: int
    team_stats: TeamStatsResponse = Field(..., alias="teamStats")
    team_targets: TeamTargetsResponse = Field(..., alias="teamTargets")
    individual_performance: list[EmployeePerformanceResponse] = Field(
        default_factory=list,
        alias="individualPerformance",
    )

    model_config = ConfigDict(populate_by_name=True)
