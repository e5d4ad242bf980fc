"""
app/api/routers/user_router.py

User management endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.schemas.users import DeleteResponse, UserCreateRequest, UserResponse
from db.repositories.errors import DuplicateEmailError, UserNotFoundError
from db.repositories.user_repository import UserRepository
from db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def list_users(db: Session = Depends(get_db)) -> list[UserResponse]:
    return [UserResponse.model_validate(user) for user in UserRepository(db).list_users()]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    body: UserCreateRequest,
    db: Session = Depends(get_db),
) -> UserResponse:
    """
    Create a user.

    Raises HTTP 400 if the email is already registered.
    """
    try:
        user = UserRepository(db).create(
            name=body.name,
            email=body.email,
            password=body.password,
            role=body.role,
            designation=body.designation,
        )
        db.commit()
    except DuplicateEmailError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    logger.info("User created user_id=%s role=%s", user.id, user.role.value)
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=DeleteResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
) -> DeleteResponse:
    """
    Hard-delete a user. Their targets and reports are kept.

    Raises HTTP 404 if the user does not exist.
    """
    try:
        UserRepository(db).delete(user_id)
        db.commit()
    except UserNotFoundError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc

    logger.info("User deleted user_id=%s", user_id)
    return DeleteResponse(success=True)
