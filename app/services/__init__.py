"""
app/services package marker.
"""

from app.services.auth_service import AuthService, InvalidCredentialsError
from app.services.performance_service import (
    MetricProgress,
    MonthlyPerformance,
    PerformanceService,
    progress_percent,
)
from app.services.report_service import ReportService
from app.services.seed_service import seed_demo_data
from app.services.stats_service import AdminStats, StatsService
from app.services.target_service import TargetService

__all__ = [
    "AdminStats",
    "AuthService",
    "InvalidCredentialsError",
    "MetricProgress",
    "MonthlyPerformance",
    "PerformanceService",
    "ReportService",
    "StatsService",
    "TargetService",
    "progress_percent",
    "seed_demo_data",
]
