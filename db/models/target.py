"""
db/models/target.py

Monthly quota per employee. One row per (user_id, year, month).
"""

from __future__ import annotations

from sqlalchemy import Float, Index, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base

TARGET_PERIOD_CONSTRAINT = "uq_targets_user_period"


class Target(Base):
    """
    Revenue and activity quotas an admin sets for one employee and month.

    ``user_id`` carries no database foreign key: targets outlive the user
    they belong to. The unique constraint on ``(user_id, year, month)``
    backs the upsert performed by TargetRepository.
    """

    __tablename__ = "targets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)

    sales_target_yearly: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    sales_target_monthly: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    call_target_monthly: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    email_target_monthly: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    whatsapp_target_monthly: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    social_target_monthly: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("user_id", "year", "month", name=TARGET_PERIOD_CONSTRAINT),
        Index("ix_targets_year_month", "year", "month"),
    )

    def __repr__(self) -> str:
        return f"<Target id={self.id} user_id={self.user_id} period={self.year}-{self.month:02d}>"
