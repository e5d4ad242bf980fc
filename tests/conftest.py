"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database. ``StaticPool`` keeps a
single connection alive so all sessions of one test see the same data.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Generator

# Must be set before app.main is imported: create_app() validates env.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_MODE", "local")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import db.models  # noqa: F401  registers all ORM models on Base.metadata
from db.base import Base
from db.models.user import User, UserRole
from db.repositories.user_repository import UserRepository
from db.session import build_session_factory, get_db


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return build_session_factory(engine)


@pytest.fixture()
def db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    with session_factory() as session:
        yield session


@pytest.fixture()
def client(session_factory: sessionmaker) -> Generator[TestClient, None, None]:
    """
    TestClient bound to the per-test database.

    Used without a ``with`` block so the lifespan (which talks to the
    configured DATABASE_URL) does not run.
    """
    from app.main import create_app

    application = create_app()

    def _override_get_db() -> Generator[Session, None, None]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[get_db] = _override_get_db
    yield TestClient(application)
    application.dependency_overrides.clear()


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    counter = {"n": 0}

    def _make(
        name: str | None = None,
        *,
        role: UserRole = UserRole.EMPLOYEE,
        email: str | None = None,
        password: str = "secret",
        designation: str | None = "Sales Executive",
    ) -> User:
        counter["n"] += 1
        user = UserRepository(db_session).create(
            name=name or f"User {counter['n']}",
            email=email or f"user{counter['n']}@scholar.test",
            password=password,
            role=role,
            designation=designation,
        )
        db_session.commit()
        return user

    return _make

