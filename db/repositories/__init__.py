"""
Repository layer exports.
"""

from db.repositories.errors import (
    CRMRepositoryError,
    DuplicateEmailError,
    KPINotFoundError,
    RecordConflictError,
    RecordNotFoundError,
    RecordValidationError,
    UnknownKPIError,
    UserNotFoundError,
)
from db.repositories.kpi_repository import KPIRepository
from db.repositories.report_repository import ReportRepository
from db.repositories.target_repository import TargetRepository
from db.repositories.types import ReportInput, ReportingPeriod, TargetValues
from db.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
    "TargetRepository",
    "ReportRepository",
    "KPIRepository",
    "ReportingPeriod",
    "ReportInput",
    "TargetValues",
    "CRMRepositoryError",
    "RecordNotFoundError",
    "RecordConflictError",
    "RecordValidationError",
    "UserNotFoundError",
    "KPINotFoundError",
    "DuplicateEmailError",
    "UnknownKPIError",
]
