"""
app/api/routers/report_router.py

Daily report endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_reporting_period
from app.schemas.reports import (
    MetricProgressResponse,
    MonthlySummaryResponse,
    ReportCreateRequest,
    ReportPayload,
    ReportResponse,
)
from app.services.report_service import ReportService
from db.repositories.errors import UnknownKPIError, UserNotFoundError
from db.repositories.types import ReportingPeriod
from db.session import get_db

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/{user_id}", response_model=list[ReportResponse])
def list_reports(
    user_id: int,
    db: Session = Depends(get_db),
) -> list[ReportResponse]:
    """
    All reports of ``user_id``, newest date first.

    Reports of a deleted user are still returned.
    """
    return [ReportResponse.model_validate(report) for report in ReportService(db).list_reports(user_id)]


@router.get("/{user_id}/summary", response_model=MonthlySummaryResponse)
def monthly_summary(
    user_id: int,
    period: ReportingPeriod = Depends(get_reporting_period),
    db: Session = Depends(get_db),
) -> MonthlySummaryResponse:
    """
    Achieved-versus-target for one month (current month by default).
    """
    summary = ReportService(db).monthly_summary(user_id, period)
    return MonthlySummaryResponse(
        user_id=user_id,
        year=period.year,
        month=period.month,
        report_count=summary.report_count,
        metrics=[
            MetricProgressResponse(
                metric=item.metric,
                achieved=item.achieved,
                target=item.target,
                progress=item.progress,
            )
            for item in summary.metrics
        ],
    )


def _submit(user_id: int, body: ReportPayload, db: Session) -> ReportResponse:
    try:
        report = ReportService(db).submit_report(body.to_input(user_id))
        db.commit()
    except UserNotFoundError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except UnknownKPIError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    return ReportResponse.model_validate(report)


@router.post(
    "",
    response_model=ReportResponse,
    status_code=status.HTTP_201_CREATED,
)
def submit_report(
    body: ReportCreateRequest,
    db: Session = Depends(get_db),
) -> ReportResponse:
    """
    Store a daily report for ``body.user_id``. Same-day reports are not merged.

    Raises HTTP 404 for an unknown user, HTTP 400 for unknown KPI names when
    strict KPI checking is enabled.
    """
    return _submit(body.user_id, body, db)


@router.post(
    "/{user_id}",
    response_model=ReportResponse,
    status_code=status.HTTP_201_CREATED,
)
def submit_report_for_user(
    user_id: int,
    body: ReportPayload,
    db: Session = Depends(get_db),
) -> ReportResponse:
    return _submit(user_id, body, db)
