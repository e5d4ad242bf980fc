"""
app/schemas package marker.
"""

from app.schemas.kpis import KPICreateRequest, KPIResponse
from app.schemas.reports import (
    MetricProgressResponse,
    MonthlySummaryResponse,
    ReportCreateRequest,
    ReportPayload,
    ReportResponse,
)
from app.schemas.stats import (
    AdminStatsResponse,
    EmployeePerformanceResponse,
    TeamStatsResponse,
    TeamTargetsResponse,
)
from app.schemas.targets import TargetCreateRequest, TargetResponse, TargetUpsertRequest
from app.schemas.users import DeleteResponse, LoginRequest, UserCreateRequest, UserResponse

__all__ = [
    "AdminStatsResponse",
    "DeleteResponse",
    "EmployeePerformanceResponse",
    "KPICreateRequest",
    "KPIResponse",
    "LoginRequest",
    "MetricProgressResponse",
    "MonthlySummaryResponse",
    "ReportCreateRequest",
    "ReportPayload",
    "ReportResponse",
    "TargetCreateRequest",
    "TargetResponse",
    "TargetUpsertRequest",
    "TeamStatsResponse",
    "TeamTargetsResponse",
    "UserCreateRequest",
    "UserResponse",
]
