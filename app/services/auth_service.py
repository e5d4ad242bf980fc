"""
app/services/auth_service.py

Email/password login against the users table.

Passwords are stored and compared as plaintext and no session or token is
issued; the client keeps the returned user record and treats its presence
as being logged in.
"""

from __future__ import annotations

import logging
import secrets

from sqlalchemy.orm import Session

from db.models.user import User
from db.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

GENERIC_LOGIN_ERROR = "Invalid credentials"


class InvalidCredentialsError(Exception):
    """
    Raised for every failed login.

    The message never says whether the email or the password was wrong.
    """

    def __init__(self) -> None:
        super().__init__(GENERIC_LOGIN_ERROR)


class AuthService:
    def __init__(self, session: Session) -> None:
        self._users = UserRepository(session)

    def authenticate(self, email: str, password: str) -> User:
        user = self._users.get_by_email(email)
        if user is None or not secrets.compare_digest(
            user.password.encode("utf-8"), password.encode("utf-8")
        ):
            logger.info("Login rejected email=%r", email)
            raise InvalidCredentialsError()

        logger.info("Login accepted user_id=%s role=%s", user.id, user.role.value)
        return user
