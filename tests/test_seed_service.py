from __future__ import annotations

from datetime import date

from sqlalchemy import func, select

from app.services.auth_service import AuthService
from app.services.seed_service import SAMPLE_REPORT_DAYS, seed_demo_data
from app.services.stats_service import StatsService
from db.models.kpi import KPI
from db.models.report import Report
from db.models.user import User, UserRole
from db.repositories.types import ReportingPeriod

SEED_DAY = date(2026, 1, 20)


def _count(session, model) -> int:
    return session.scalar(select(func.count()).select_from(model))


class TestSeedDemoData:
    def test_seeds_fresh_database(self, db_session) -> None:
        assert seed_demo_data(db_session, today=SEED_DAY) is True
        db_session.commit()

        assert _count(db_session, User) == 4
        assert _count(db_session, Report) == 3 * SAMPLE_REPORT_DAYS
        assert _count(db_session, KPI) == 2

        admin = AuthService(db_session).authenticate("admin@scholar.com", "admin123")
        assert admin.role is UserRole.ADMIN

    def test_second_run_is_a_no_op(self, db_session) -> None:
        seed_demo_data(db_session, today=SEED_DAY)
        db_session.commit()

        assert seed_demo_data(db_session, today=SEED_DAY) is False
        assert _count(db_session, User) == 4

    def test_seeded_month_shows_in_stats(self, db_session) -> None:
        seed_demo_data(db_session, today=SEED_DAY)
        db_session.commit()

        stats = StatsService(db_session).get_admin_stats(ReportingPeriod.containing(SEED_DAY))

        # 5 days x (15k + 12k + 45k)
        assert stats.team_stats.total_revenue == 5 * 72_000
        assert stats.team_targets.total_sales_target == 1_350_000
        assert [row.name for row in stats.individual_performance] == [
            "Amit Patel",
            "Rajesh Kumar",
            "Priya Sharma",
        ]
