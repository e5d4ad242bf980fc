"""
app/api/routers/stats_router.py

Admin dashboard statistics.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.dependencies import get_reporting_period
from app.schemas.stats import (
    AdminStatsResponse,
    EmployeePerformanceResponse,
    TeamStatsResponse,
    TeamTargetsResponse,
)
from app.services.stats_service import StatsService
from db.repositories.types import ReportingPeriod
from db.session import get_db

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=AdminStatsResponse)
def admin_stats(
    period: ReportingPeriod = Depends(get_reporting_period),
    db: Session = Depends(get_db),
) -> AdminStatsResponse:
    """
    Team totals, team targets and per-employee performance for one month.

    The month defaults to the current calendar month at request time;
    ``year``/``month`` query parameters select a past one.
    """
    stats = StatsService(db).get_admin_stats(period)
    return AdminStatsResponse(
        year=period.year,
        month=period.month,
        team_stats=TeamStatsResponse.model_validate(stats.team_stats),
        team_targets=TeamTargetsResponse.model_validate(stats.team_targets),
        individual_performance=[
            EmployeePerformanceResponse.model_validate(row) for row in stats.individual_performance
        ],
    )
