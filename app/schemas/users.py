"""
app/schemas/users.py

Request/response schemas for login and user management.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from db.models.user import UserRole


class LoginRequest(BaseModel):
    email: str
    password: str


class UserCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)
    role: UserRole = UserRole.EMPLOYEE
    designation: str | None = Field(default=None, max_length=255)


class UserResponse(BaseModel):
    """
    Public view of a user. The password is never part of it.
    """

    id: int
    name: str
    email: str
    role: UserRole
    designation: str | None = None

    model_config = {"from_attributes": True}


class DeleteResponse(BaseModel):
    success: bool = True
