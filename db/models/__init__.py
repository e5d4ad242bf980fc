"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.kpi import KPI
from db.models.report import Report
from db.models.target import Target
from db.models.user import User, UserRole

__all__ = [
    "KPI",
    "Report",
    "Target",
    "User",
    "UserRole",
]
