"""
db/models/report.py

Daily activity report submitted by an employee.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Float, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, CreatedAtMixin, PortableJSON


class Report(Base, CreatedAtMixin):
    """
    One submission of a day's activity.

    Several reports for the same user and date are allowed; they are kept
    as separate rows. ``kpi_data`` maps KPI names to the values the
    employee typed in and is stored without checking it against ``kpis``.
    """

    __tablename__ = "reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[date] = mapped_column(Date, nullable=False)

    calls: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    emails: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    whatsapp: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    social: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    revenue: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    leads: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    followups: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)

    kpi_data: Mapped[dict[str, str] | None] = mapped_column(
        PortableJSON,
        nullable=True,
        comment="KPI name -> entered value",
    )

    __table_args__ = (
        Index("ix_reports_user_date", "user_id", "date"),
        Index("ix_reports_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Report id={self.id} user_id={self.user_id} date={self.date.isoformat()}>"
