"""
db/repositories/target_repository.py

Persistence layer for monthly Target rows.

All methods are transaction-safe. The caller controls commit/rollback;
this repository never commits on its own.
"""

from __future__ import annotations

from dataclasses import asdict

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models.target import Target
from db.repositories.types import ReportingPeriod, TargetValues


class TargetRepository:
    """
    Repository for writing and querying Target rows.

    Upsert semantics: saving a target whose ``(user_id, year, month)``
    already exists overwrites all six quota figures in place instead of
    inserting a second row.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def upsert_target(
        self,
        *,
        user_id: int,
        year: int,
        month: int,
        values: TargetValues,
    ) -> tuple[Target, bool]:
        """
        Insert or overwrite the target for one user and month.

        Values are stored as given; negative quotas are accepted.

        Returns
        -------
        tuple[Target, bool]
            The persisted row (flushed, not committed) and ``True`` when a
            new row was inserted, ``False`` when an existing one was updated.
        """
        payload = asdict(values)
        existing = self.get_for_period(user_id, ReportingPeriod(year=year, month=month))

        if existing is not None:
            for field_name, value in payload.items():
                setattr(existing, field_name, value)
            self._session.flush()
            return existing, False

        target = Target(user_id=user_id, year=year, month=month, **payload)
        self._session.add(target)
        self._session.flush()
        return target, True

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_for_period(self, user_id: int, period: ReportingPeriod) -> Target | None:
        stmt = select(Target).where(
            Target.user_id == user_id,
            Target.year == period.year,
            Target.month == period.month,
        )
        return self._session.scalars(stmt).first()

    def get_latest(self, user_id: int) -> Target | None:
        """
        Return the target with the greatest (year, month) for ``user_id``.
        """
        stmt = (
            select(Target)
            .where(Target.user_id == user_id)
            .order_by(Target.year.desc(), Target.month.desc())
            .limit(1)
        )
        return self._session.scalars(stmt).first()

    def list_for_user(self, user_id: int) -> list[Target]:
        stmt = (
            select(Target)
            .where(Target.user_id == user_id)
            .order_by(Target.year.desc(), Target.month.desc())
        )
        return list(self._session.scalars(stmt).all())
