"""
app/api/dependencies.py

Shared FastAPI dependencies for request parsing.
"""

from __future__ import annotations

from fastapi import HTTPException, Query, status

from db.repositories.types import MAX_YEAR, ReportingPeriod


def get_reporting_period(
    year: int | None = Query(default=None, ge=1, le=MAX_YEAR, description="Defaults to the current year"),
    month: int | None = Query(default=None, ge=1, le=12, description="Defaults to the current month"),
) -> ReportingPeriod:
    """
    Resolve the month a request is about.

    Without parameters this is the current calendar month, read from the
    wall clock at request time. ``month`` alone applies to the current
    year; ``year`` alone is rejected because it does not name a month.
    """

    current = ReportingPeriod.current()
    if year is not None and month is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="month is required when year is given.",
        )
    return ReportingPeriod(
        year=year if year is not None else current.year,
        month=month if month is not None else current.month,
    )


def get_optional_period(
    year: int | None = Query(default=None, ge=1, le=MAX_YEAR),
    month: int | None = Query(default=None, ge=1, le=12),
) -> ReportingPeriod | None:
    """
    Like get_reporting_period, but ``None`` when neither parameter is given.
    """

    if year is None and month is None:
        return None
    return get_reporting_period(year=year, month=month)
