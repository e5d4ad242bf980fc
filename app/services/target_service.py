"""
app/services/target_service.py

Monthly target upsert and lookup.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from db.models.target import Target
from db.repositories.target_repository import TargetRepository
from db.repositories.types import ReportingPeriod, TargetValues
from db.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class TargetService:
    def __init__(self, session: Session) -> None:
        self._users = UserRepository(session)
        self._targets = TargetRepository(session)

    def save_target(self, *, user_id: int, year: int, month: int, values: TargetValues) -> Target:
        """
        Upsert the target of ``user_id`` for ``year``/``month``.

        Raises UserNotFoundError for an unknown user. Quotas are not range
        checked.
        """
        self._users.require(user_id)
        target, created = self._targets.upsert_target(
            user_id=user_id,
            year=year,
            month=month,
            values=values,
        )
        logger.info(
            "Target %s user_id=%s period=%s-%02d",
            "created" if created else "updated",
            user_id,
            year,
            month,
        )
        return target

    def get_target(self, user_id: int, period: ReportingPeriod | None = None) -> Target | None:
        """
        The target for ``period``, or the most recent one when no period is given.
        """
        if period is None:
            return self._targets.get_latest(user_id)
        return self._targets.get_for_period(user_id, period)
