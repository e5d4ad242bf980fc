"""
db/models/user.py

User model: an admin or a sales employee.
"""

from __future__ import annotations

import enum

from sqlalchemy import Enum, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, TimestampMixin


class UserRole(str, enum.Enum):
    """Closed set of roles."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class User(Base, TimestampMixin):
    """
    A CRM account.

    The password is stored as entered and compared verbatim at login.
    Deleting a user is a hard delete; the user's targets and reports are
    left in place and stay addressable by ``user_id``.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    password: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name="user_role",
            native_enum=False,
            values_callable=lambda roles: [role.value for role in roles],
            validate_strings=True,
        ),
        nullable=False,
        default=UserRole.EMPLOYEE,
    )

    designation: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Job title shown on dashboards, e.g. 'Sales Executive'",
    )

    __table_args__ = (Index("ix_users_role", "role"),)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} role={self.role.value!r}>"
