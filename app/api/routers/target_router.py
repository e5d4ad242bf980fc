"""
app/api/routers/target_router.py

Monthly target endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_optional_period
from app.schemas.targets import TargetCreateRequest, TargetResponse, TargetUpsertRequest
from app.services.target_service import TargetService
from db.repositories.errors import UserNotFoundError
from db.repositories.types import ReportingPeriod
from db.session import get_db

router = APIRouter(prefix="/targets", tags=["targets"])


@router.get("/{user_id}", response_model=None)
def get_target(
    user_id: int,
    period: ReportingPeriod | None = Depends(get_optional_period),
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    """
    Return the user's most recent target, or the one for ``year``/``month``.

    An empty object is returned when no target exists.
    """
    target = TargetService(db).get_target(user_id, period)
    if target is None:
        return {}
    return TargetResponse.model_validate(target).model_dump()


def _save(user_id: int, body: TargetUpsertRequest, db: Session) -> TargetResponse:
    try:
        target = TargetService(db).save_target(
            user_id=user_id,
            year=body.year,
            month=body.month,
            values=body.to_values(),
        )
        db.commit()
    except UserNotFoundError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return TargetResponse.model_validate(target)


@router.post("", response_model=TargetResponse)
def upsert_target(
    body: TargetCreateRequest,
    db: Session = Depends(get_db),
) -> TargetResponse:
    """
    Insert or overwrite the target for ``body.user_id`` and the given month.

    Raises HTTP 404 if the user does not exist.
    """
    return _save(body.user_id, body, db)


@router.post("/{user_id}", response_model=TargetResponse)
def upsert_target_for_user(
    user_id: int,
    body: TargetUpsertRequest,
    db: Session = Depends(get_db),
) -> TargetResponse:
    return _save(user_id, body, db)
