"""
Repository-layer exceptions.

Three families map onto HTTP outcomes in the routers: not-found, conflict
and validation.
"""

from __future__ import annotations


class CRMRepositoryError(Exception):
    """Base exception for repository failures."""


class RecordNotFoundError(CRMRepositoryError):
    """Raised when a referenced row does not exist."""


class RecordConflictError(CRMRepositoryError):
    """Raised when a write collides with a uniqueness rule."""


class RecordValidationError(CRMRepositoryError):
    """Raised when a payload is well-formed but not acceptable."""


class UserNotFoundError(RecordNotFoundError):
    """Raised when a referenced user does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} not found.")
        self.user_id = user_id


class KPINotFoundError(RecordNotFoundError):
    """Raised when a referenced KPI definition does not exist."""

    def __init__(self, kpi_id: int) -> None:
        super().__init__(f"KPI {kpi_id} not found.")
        self.kpi_id = kpi_id


class DuplicateEmailError(RecordConflictError):
    """Raised when a user is created with an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already exists")
        self.email = email


class UnknownKPIError(RecordValidationError):
    """Raised when a report names KPIs that are not active definitions."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(f"Unknown KPI(s): {', '.join(sorted(names))}.")
        self.names = sorted(names)
