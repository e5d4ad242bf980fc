"""
db/models/kpi.py

Admin-defined extra metric collected on each report.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base


class KPI(Base):
    __tablename__ = "kpis"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Inactive KPIs are hidden from the report form",
    )

    __table_args__ = (Index("ix_kpis_is_active", "is_active"),)

    def __repr__(self) -> str:
        return f"<KPI id={self.id} name={self.name!r} active={self.is_active}>"
