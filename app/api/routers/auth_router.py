"""
app/api/routers/auth_router.py

Login endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.schemas.users import LoginRequest, UserResponse
from app.services.auth_service import AuthService, InvalidCredentialsError
from db.session import get_db

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=UserResponse)
def login(
    body: LoginRequest,
    db: Session = Depends(get_db),
) -> UserResponse:
    """
    Check email and password and return the user record.

    Raises HTTP 401 with the same message whether the email is unknown or
    the password is wrong. No token is issued.
    """
    try:
        user = AuthService(db).authenticate(body.email, body.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc
    return UserResponse.model_validate(user)
