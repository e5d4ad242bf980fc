"""create users, targets, reports and kpis tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _json_type() -> sa.types.TypeEngine:
    return sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=8), nullable=False),
        sa.Column(
            "designation",
            sa.String(length=255),
            nullable=True,
            comment="Job title shown on dashboards, e.g. 'Sales Executive'",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("ix_users_role", "users", ["role"], unique=False)

    op.create_table(
        "targets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("sales_target_yearly", sa.Float(), nullable=False),
        sa.Column("sales_target_monthly", sa.Float(), nullable=False),
        sa.Column("call_target_monthly", sa.Integer(), nullable=False),
        sa.Column("email_target_monthly", sa.Integer(), nullable=False),
        sa.Column("whatsapp_target_monthly", sa.Integer(), nullable=False),
        sa.Column("social_target_monthly", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_targets"),
        sa.UniqueConstraint("user_id", "year", "month", name="uq_targets_user_period"),
    )
    op.create_index("ix_targets_year_month", "targets", ["year", "month"], unique=False)

    op.create_table(
        "reports",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("calls", sa.Integer(), nullable=False),
        sa.Column("emails", sa.Integer(), nullable=False),
        sa.Column("whatsapp", sa.Integer(), nullable=False),
        sa.Column("social", sa.Integer(), nullable=False),
        sa.Column("revenue", sa.Float(), nullable=False),
        sa.Column("leads", sa.Integer(), nullable=False),
        sa.Column("followups", sa.Integer(), nullable=False),
        sa.Column("remarks", sa.Text(), nullable=True),
        sa.Column("kpi_data", _json_type(), nullable=True, comment="KPI name -> entered value"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_reports"),
    )
    op.create_index("ix_reports_user_date", "reports", ["user_id", "date"], unique=False)
    op.create_index("ix_reports_date", "reports", ["date"], unique=False)

    op.create_table(
        "kpis",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "is_active",
            sa.Boolean(),
            nullable=False,
            comment="Inactive KPIs are hidden from the report form",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_kpis"),
    )
    op.create_index("ix_kpis_is_active", "kpis", ["is_active"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_kpis_is_active", table_name="kpis")
    op.drop_table("kpis")
    op.drop_index("ix_reports_date", table_name="reports")
    op.drop_index("ix_reports_user_date", table_name="reports")
    op.drop_table("reports")
    op.drop_index("ix_targets_year_month", table_name="targets")
    op.drop_table("targets")
    op.drop_index("ix_users_role", table_name="users")
    op.drop_table("users")
