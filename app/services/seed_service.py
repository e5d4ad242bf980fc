"""
app/services/seed_service.py

Demo data for a fresh database.

Runs only when no admin account exists, so restarting a seeded instance
never duplicates rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from sqlalchemy.orm import Session

from db.models.user import UserRole
from db.repositories.kpi_repository import KPIRepository
from db.repositories.report_repository import ReportRepository
from db.repositories.target_repository import TargetRepository
from db.repositories.types import ReportInput, ReportingPeriod, TargetValues
from db.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

SAMPLE_REPORT_DAYS = 5


@dataclass(frozen=True)
class _DemoEmployee:
    name: str
    email: str
    designation: str
    target: TargetValues
    daily: dict[str, float | int]
    remarks: str


_ADMIN = {
    "name": "Admin Manager",
    "email": "admin@scholar.com",
    "password": "admin123",
    "designation": "Manager",
}

_EMPLOYEE_PASSWORD = "emp123"

_EMPLOYEES: tuple[_DemoEmployee, ...] = (
    _DemoEmployee(
        name="Rajesh Kumar",
        email="rajesh@scholar.com",
        designation="Sr. Sales Executive",
        target=TargetValues(5_000_000, 400_000, 500, 300, 200, 100),
        daily={"calls": 25, "emails": 15, "whatsapp": 10, "social": 5, "revenue": 15_000, "leads": 3, "followups": 5},
        remarks="Good day, closed one library subscription.",
    ),
    _DemoEmployee(
        name="Priya Sharma",
        email="priya@scholar.com",
        designation="Sales Executive",
        target=TargetValues(3_000_000, 250_000, 600, 400, 300, 150),
        daily={"calls": 30, "emails": 20, "whatsapp": 15, "social": 8, "revenue": 12_000, "leads": 5, "followups": 8},
        remarks="Followed up with 3 universities.",
    ),
    _DemoEmployee(
        name="Amit Patel",
        email="amit@scholar.com",
        designation="Team Leader",
        target=TargetValues(8_000_000, 700_000, 400, 200, 100, 50),
        daily={"calls": 20, "emails": 10, "whatsapp": 5, "social": 3, "revenue": 45_000, "leads": 2, "followups": 3},
        remarks="Institutional meeting successful.",
    ),
)

_KPIS: tuple[tuple[str, str], ...] = (
    ("Library Visits", "Number of physical library visits conducted."),
    ("Webinar Attendance", "Number of institutional webinars hosted."),
)


def seed_demo_data(session: Session, *, today: date | None = None) -> bool:
    """
    Insert the demo admin, three employees with current-month targets, five
    days of reports each and two KPI definitions.

    Returns ``True`` when data was written. The caller commits.
    """
    users = UserRepository(session)
    if users.find_admin() is not None:
        logger.info("Demo seed skipped: an admin account already exists")
        return False

    today = today or date.today()
    period = ReportingPeriod.containing(today)
    targets = TargetRepository(session)
    reports = ReportRepository(session)

    users.create(role=UserRole.ADMIN, **_ADMIN)

    for employee in _EMPLOYEES:
        user = users.create(
            name=employee.name,
            email=employee.email,
            password=_EMPLOYEE_PASSWORD,
            role=UserRole.EMPLOYEE,
            designation=employee.designation,
        )
        targets.upsert_target(
            user_id=user.id,
            year=period.year,
            month=period.month,
            values=employee.target,
        )
        for offset in range(SAMPLE_REPORT_DAYS):
            reports.create_report(
                ReportInput(
                    user_id=user.id,
                    date=today - timedelta(days=offset),
                    remarks=employee.remarks,
                    **employee.daily,
                )
            )

    kpis = KPIRepository(session)
    for name, description in _KPIS:
        kpis.create(name=name, description=description)

    logger.info(
        "Demo data seeded: %d employees, %d reports, %d KPIs",
        len(_EMPLOYEES),
        len(_EMPLOYEES) * SAMPLE_REPORT_DAYS,
        len(_KPIS),
    )
    return True
