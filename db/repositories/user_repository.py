"""
db/repositories/user_repository.py

Persistence layer for User rows.

The caller controls commit/rollback; this repository only flushes.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from db.models.user import User, UserRole
from db.repositories.errors import DuplicateEmailError, UserNotFoundError


class UserRepository:
    """
    Repository for creating, listing and deleting users.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list_users(self) -> list[User]:
        stmt = select(User).order_by(User.id)
        return list(self._session.scalars(stmt).all())

    def get(self, user_id: int) -> User | None:
        return self._session.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return self._session.scalars(stmt).first()

    def require(self, user_id: int) -> User:
        """
        Return the user or raise UserNotFoundError.
        """
        user = self.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def find_admin(self) -> User | None:
        stmt = select(User).where(User.role == UserRole.ADMIN).order_by(User.id)
        return self._session.scalars(stmt).first()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: UserRole,
        designation: str | None = None,
    ) -> User:
        """
        Insert a user.

        Raises
        ------
        DuplicateEmailError
            When ``email`` is already registered. The session must be rolled
            back by the caller if the violation surfaced at flush time.
        """
        if self.get_by_email(email) is not None:
            raise DuplicateEmailError(email)

        user = User(
            name=name,
            email=email,
            password=password,
            role=role,
            designation=designation,
        )
        self._session.add(user)
        try:
            self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEmailError(email) from exc
        return user

    def delete(self, user_id: int) -> None:
        """
        Hard-delete a user.

        Targets and reports referencing the user are intentionally left in
        place and remain readable by ``user_id``.
        """
        result = self._session.execute(delete(User).where(User.id == user_id))
        if result.rowcount == 0:
            raise UserNotFoundError(user_id)
