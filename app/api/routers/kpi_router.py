"""
app/api/routers/kpi_router.py

KPI definition endpoints.

Active KPIs drive the extra inputs of the daily report form. Deactivating
a KPI hides it from the form; reports that already carry it are untouched.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.schemas.kpis import KPICreateRequest, KPIResponse
from db.repositories.errors import KPINotFoundError
from db.repositories.kpi_repository import KPIRepository
from db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/kpis", tags=["kpis"])


@router.get("", response_model=list[KPIResponse])
def list_kpis(db: Session = Depends(get_db)) -> list[KPIResponse]:
    return [KPIResponse.model_validate(kpi) for kpi in KPIRepository(db).list_active()]


@router.post(
    "",
    response_model=KPIResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_kpi(
    body: KPICreateRequest,
    db: Session = Depends(get_db),
) -> KPIResponse:
    kpi = KPIRepository(db).create(name=body.name, description=body.description)
    db.commit()
    logger.info("KPI created kpi_id=%s name=%r", kpi.id, kpi.name)
    return KPIResponse.model_validate(kpi)


@router.delete("/{kpi_id}", response_model=KPIResponse)
def deactivate_kpi(
    kpi_id: int,
    db: Session = Depends(get_db),
) -> KPIResponse:
    """
    Mark a KPI inactive.

    Raises HTTP 404 if the KPI does not exist.
    """
    try:
        kpi = KPIRepository(db).deactivate(kpi_id)
        db.commit()
    except KPINotFoundError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc

    logger.info("KPI deactivated kpi_id=%s", kpi_id)
    return KPIResponse.model_validate(kpi)
