"""
db/repositories/report_repository.py

Persistence layer for daily Report rows. Reports are append-only.
"""

from __future__ import annotations

from dataclasses import asdict

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models.report import Report
from db.repositories.types import ReportInput, ReportingPeriod


class ReportRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def create_report(self, payload: ReportInput) -> Report:
        """
        Insert one report unconditionally. Same-day duplicates are kept.
        """
        report = Report(**asdict(payload))
        self._session.add(report)
        self._session.flush()
        return report

    def list_for_user(self, user_id: int) -> list[Report]:
        """
        Newest date first; reports sharing a date keep insertion order.
        """
        stmt = (
            select(Report)
            .where(Report.user_id == user_id)
            .order_by(Report.date.desc(), Report.id.asc())
        )
        return list(self._session.scalars(stmt).all())

    def list_for_period(self, user_id: int, period: ReportingPeriod) -> list[Report]:
        stmt = (
            select(Report)
            .where(
                Report.user_id == user_id,
                Report.date >= period.start,
                Report.date < period.end,
            )
            .order_by(Report.date.desc(), Report.id.asc())
        )
        return list(self._session.scalars(stmt).all())
