"""
app/services/stats_service.py

Monthly aggregation for the admin dashboard.

Produces three result sets for one reporting period:

    team stats              – sums of every activity counter and revenue
                              over all reports dated in the month
    team targets            – sums of every monthly quota over all target
                              rows for the month
    individual performance  – one row per employee (role = employee), left
                              joined to their month of reports and their
                              target, ordered by achieved revenue descending

Query design
------------
Every public method issues exactly one SQL statement. Month filtering uses
the half-open range ``date >= first_day AND date < first_day_of_next_month``
so the same statement runs on SQLite and PostgreSQL. Missing rows collapse
to zero through ``COALESCE``.

No writes happen here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from app.services.performance_service import progress_percent
from db.models.report import Report
from db.models.target import Target
from db.models.user import User, UserRole
from db.repositories.types import ReportingPeriod

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TeamStats:
    total_calls: int = 0
    total_emails: int = 0
    total_whatsapp: int = 0
    total_social: int = 0
    total_leads: int = 0
    total_followups: int = 0
    total_revenue: float = 0.0


@dataclass(frozen=True)
class TeamTargets:
    total_sales_target: float = 0.0
    total_call_target: int = 0
    total_email_target: int = 0
    total_whatsapp_target: int = 0
    total_social_target: int = 0
    total_yearly_sales_target: float = 0.0


@dataclass(frozen=True)
class EmployeePerformance:
    user_id: int
    name: str
    designation: str | None
    achieved_revenue: float
    target_revenue: float
    achieved_calls: int
    target_calls: int

    @property
    def revenue_progress(self) -> float:
        return progress_percent(self.achieved_revenue, self.target_revenue)


@dataclass(frozen=True)
class AdminStats:
    period: ReportingPeriod
    team_stats: TeamStats
    team_targets: TeamTargets
    individual_performance: list[EmployeePerformance]


def _zero(expr: Any) -> Any:
    return func.coalesce(expr, 0)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class StatsService:
    """
    Read-only aggregation over reports, targets and users.

    Parameters
    ----------
    session:
        Active SQLAlchemy session. The caller controls its lifecycle.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_admin_stats(self, period: ReportingPeriod) -> AdminStats:
        stats = AdminStats(
            period=period,
            team_stats=self.get_team_stats(period),
            team_targets=self.get_team_targets(period),
            individual_performance=self.get_individual_performance(period),
        )
        logger.info(
            "Admin stats computed period=%s employees=%d total_revenue=%.2f",
            period,
            len(stats.individual_performance),
            stats.team_stats.total_revenue,
        )
        return stats

    def get_team_stats(self, period: ReportingPeriod) -> TeamStats:
        """
        Sum activity counters and revenue over all reports in ``period``.

        Reports of deleted users still count.
        """
        stmt = select(
            _zero(func.sum(Report.calls)),
            _zero(func.sum(Report.emails)),
            _zero(func.sum(Report.whatsapp)),
            _zero(func.sum(Report.social)),
            _zero(func.sum(Report.leads)),
            _zero(func.sum(Report.followups)),
            _zero(func.sum(Report.revenue)),
        ).where(Report.date >= period.start, Report.date < period.end)

        calls, emails, whatsapp, social, leads, followups, revenue = self._session.execute(stmt).one()
        return TeamStats(
            total_calls=int(calls),
            total_emails=int(emails),
            total_whatsapp=int(whatsapp),
            total_social=int(social),
            total_leads=int(leads),
            total_followups=int(followups),
            total_revenue=float(revenue),
        )

    def get_team_targets(self, period: ReportingPeriod) -> TeamTargets:
        """
        Sum every monthly quota over the target rows of ``period``.
        """
        stmt = select(
            _zero(func.sum(Target.sales_target_monthly)),
            _zero(func.sum(Target.call_target_monthly)),
            _zero(func.sum(Target.email_target_monthly)),
            _zero(func.sum(Target.whatsapp_target_monthly)),
            _zero(func.sum(Target.social_target_monthly)),
            _zero(func.sum(Target.sales_target_yearly)),
        ).where(Target.year == period.year, Target.month == period.month)

        sales, calls, emails, whatsapp, social, yearly = self._session.execute(stmt).one()
        return TeamTargets(
            total_sales_target=float(sales),
            total_call_target=int(calls),
            total_email_target=int(emails),
            total_whatsapp_target=int(whatsapp),
            total_social_target=int(social),
            total_yearly_sales_target=float(yearly),
        )

    def get_individual_performance(self, period: ReportingPeriod) -> list[EmployeePerformance]:
        """
        Achieved-versus-target per employee for ``period``.

        Queries
        -------
        Single statement::

            SELECT u.id, u.name, u.designation,
                   COALESCE(r.achieved_revenue, 0), COALESCE(t.sales_target_monthly, 0),
                   COALESCE(r.achieved_calls, 0),   COALESCE(t.call_target_monthly, 0)
            FROM users u
            LEFT JOIN (SELECT user_id, SUM(revenue), SUM(calls)
                       FROM reports WHERE date in period GROUP BY user_id) r
                   ON r.user_id = u.id
            LEFT JOIN targets t
                   ON t.user_id = u.id AND t.year = :year AND t.month = :month
            WHERE u.role = 'employee'
            ORDER BY 4 DESC, u.id

        Admin accounts never appear, even if they submitted reports.
        """
        report_totals = (
            select(
                Report.user_id.label("user_id"),
                func.sum(Report.revenue).label("achieved_revenue"),
                func.sum(Report.calls).label("achieved_calls"),
            )
            .where(Report.date >= period.start, Report.date < period.end)
            .group_by(Report.user_id)
            .subquery("report_totals")
        )

        achieved_revenue = _zero(report_totals.c.achieved_revenue)
        stmt = (
            select(
                User.id,
                User.name,
                User.designation,
                achieved_revenue,
                _zero(Target.sales_target_monthly),
                _zero(report_totals.c.achieved_calls),
                _zero(Target.call_target_monthly),
            )
            .select_from(User)
            .outerjoin(report_totals, report_totals.c.user_id == User.id)
            .outerjoin(
                Target,
                and_(
                    Target.user_id == User.id,
                    Target.year == period.year,
                    Target.month == period.month,
                ),
            )
            .where(User.role == UserRole.EMPLOYEE)
            .order_by(achieved_revenue.desc(), User.id.asc())
        )

        return [
            EmployeePerformance(
                user_id=user_id,
                name=name,
                designation=designation,
                achieved_revenue=float(revenue),
                target_revenue=float(target_revenue),
                achieved_calls=int(calls),
                target_calls=int(target_calls),
            )
            for user_id, name, designation, revenue, target_revenue, calls, target_calls in self._session.execute(stmt)
        ]
