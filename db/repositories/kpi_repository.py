"""
db/repositories/kpi_repository.py

Persistence layer for KPI definitions.

The caller controls commit/rollback; this repository never commits on its own.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models.kpi import KPI
from db.repositories.errors import KPINotFoundError


class KPIRepository:
    """
    Repository for KPI definitions.

    KPIs are never deleted: deactivating one hides it from the report form
    while keeping historical ``kpi_data`` entries meaningful.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_active(self) -> list[KPI]:
        stmt = select(KPI).where(KPI.is_active.is_(True)).order_by(KPI.id)
        return list(self._session.scalars(stmt).all())

    def active_names(self) -> set[str]:
        stmt = select(KPI.name).where(KPI.is_active.is_(True))
        return set(self._session.scalars(stmt).all())

    def create(self, *, name: str, description: str | None = None) -> KPI:
        kpi = KPI(name=name, description=description, is_active=True)
        self._session.add(kpi)
        self._session.flush()
        return kpi

    def deactivate(self, kpi_id: int) -> KPI:
        kpi = self._session.get(KPI, kpi_id)
        if kpi is None:
            raise KPINotFoundError(kpi_id)
        kpi.is_active = False
        self._session.flush()
        return kpi
