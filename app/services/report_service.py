"""
app/services/report_service.py

Daily report submission and the per-employee monthly summary.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.config import get_crm_settings
from app.services.performance_service import MonthlyPerformance, PerformanceService
from db.models.report import Report
from db.repositories.errors import UnknownKPIError
from db.repositories.kpi_repository import KPIRepository
from db.repositories.report_repository import ReportRepository
from db.repositories.target_repository import TargetRepository
from db.repositories.types import ReportInput, ReportingPeriod
from db.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class ReportService:
    """
    Coordinates report writes and reads across repositories.

    Parameters
    ----------
    session:
        Active SQLAlchemy session; the caller commits.
    strict_kpi_keys:
        When true, ``kpi_data`` keys must name active KPIs. Defaults to the
        ``STRICT_KPI_KEYS`` setting.
    """

    def __init__(self, session: Session, *, strict_kpi_keys: bool | None = None) -> None:
        self._users = UserRepository(session)
        self._reports = ReportRepository(session)
        self._targets = TargetRepository(session)
        self._kpis = KPIRepository(session)
        self._strict_kpi_keys = (
            get_crm_settings().strict_kpi_keys if strict_kpi_keys is None else strict_kpi_keys
        )
        self._performance = PerformanceService()

    def submit_report(self, payload: ReportInput) -> Report:
        """
        Store one report. No deduplication by date.

        Raises
        ------
        UserNotFoundError
            When ``payload.user_id`` does not exist.
        UnknownKPIError
            Only in strict mode, when ``kpi_data`` names an inactive or
            undefined KPI.
        """
        self._users.require(payload.user_id)

        if self._strict_kpi_keys and payload.kpi_data:
            unknown = set(payload.kpi_data) - self._kpis.active_names()
            if unknown:
                raise UnknownKPIError(list(unknown))

        report = self._reports.create_report(payload)
        logger.info(
            "Report submitted report_id=%s user_id=%s date=%s revenue=%s",
            report.id,
            report.user_id,
            report.date.isoformat(),
            report.revenue,
        )
        return report

    def list_reports(self, user_id: int) -> list[Report]:
        # No existence check: reports of deleted users stay readable.
        return self._reports.list_for_user(user_id)

    def monthly_summary(self, user_id: int, period: ReportingPeriod) -> MonthlyPerformance:
        reports = self._reports.list_for_period(user_id, period)
        target = self._targets.get_for_period(user_id, period)
        return self._performance.summarize_month(reports, target, period)
