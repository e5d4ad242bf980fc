"""
app/api/routers package marker.
"""

from app.api.routers.auth_router import router as auth_router
from app.api.routers.kpi_router import router as kpi_router
from app.api.routers.report_router import router as report_router
from app.api.routers.stats_router import router as stats_router
from app.api.routers.target_router import router as target_router
from app.api.routers.user_router import router as user_router

__all__ = [
    "auth_router",
    "kpi_router",
    "report_router",
    "stats_router",
    "target_router",
    "user_router",
]
