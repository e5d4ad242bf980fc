from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

API_PREFIX = "/api"


def _validate_env() -> None:
    """
    Validate required environment variables at startup.

    Runs before any database connection is opened. Raises RuntimeError
    listing every missing or invalid variable so the operator can fix all
    problems in one restart cycle.

    Rules:
    - A database URL must be resolvable (DATABASE_URL, CLOUD_DATABASE_URL
      or LOCAL_DATABASE_URL) and point at PostgreSQL or SQLite.
    - APP_MODE, when set, must be 'local' or 'cloud'.
    - SQLite is not accepted when APP_MODE=cloud.
    """

    from app.config import get_app_settings
    from db.config import is_supported_database_url, load_env_files, resolve_database_url

    load_env_files()

    errors: list[str] = []

    # --- APP_MODE -------------------------------------------------------
    app_mode: str | None = None
    try:
        app_mode = get_app_settings().mode
    except RuntimeError as exc:
        errors.append(str(exc))

    # --- Database URL ---------------------------------------------------
    try:
        database_url = resolve_database_url()
    except RuntimeError as exc:
        errors.append(str(exc))
    else:
        if not is_supported_database_url(database_url):
            errors.append(
                "Database URL must use PostgreSQL or SQLite "
                f"(got scheme '{database_url.split(':', 1)[0]}')."
            )
        elif app_mode == "cloud" and database_url.startswith("sqlite"):
            errors.append("SQLite is not permitted when APP_MODE=cloud.")

    if errors:
        raise RuntimeError(
            "Startup validation failed, missing or invalid environment variables:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _check_db() -> None:
    """Open a session and run SELECT 1. Raises RuntimeError if the DB is unreachable."""
    from sqlalchemy import text

    from db.session import SessionLocal

    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
    except Exception as exc:
        raise RuntimeError("Database unavailable.") from exc


def _ensure_schema(auto_create: bool) -> None:
    """
    Create missing tables, or verify that none are missing.

    With ``auto_create`` every table registered on Base.metadata is created
    if absent. Otherwise a missing table aborts startup so the operator
    runs ``alembic upgrade head`` first.
    """
    from sqlalchemy import inspect as sa_inspect

    import db.models  # noqa: F401  registers all ORM models on Base.metadata
    from db.base import Base
    from db.session import get_engine

    log = logging.getLogger(__name__)
    engine = get_engine()

    if auto_create:
        Base.metadata.create_all(engine)
        log.info("Database schema created or already present")
        return

    inspector = sa_inspect(engine)
    actual: set[str] = set(inspector.get_table_names())
    expected: set[str] = set(Base.metadata.tables.keys())
    missing = expected - actual

    if missing:
        log.critical(
            "Schema mismatch: %d table(s) defined in ORM metadata are absent from "
            "the database: %s. Run 'alembic upgrade head' or set DB_AUTO_CREATE=true.",
            len(missing),
            ", ".join(sorted(missing)),
        )
        raise RuntimeError(
            f"Schema mismatch: {len(missing)} table(s) missing from the database "
            f"({', '.join(sorted(missing))}). Run migrations and restart."
        )
    log.info("Database schema validated")


def _seed_if_requested(enabled: bool) -> None:
    if not enabled:
        return

    from app.services.seed_service import seed_demo_data
    from db.session import SessionLocal

    db = SessionLocal()
    try:
        if seed_demo_data(db):
            db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Validate DB connectivity and schema, seed demo data if asked to."""
    from app.config import get_crm_settings

    settings = get_crm_settings()
    _check_db()
    logging.getLogger(__name__).info("Database connectivity confirmed")
    _ensure_schema(settings.auto_create_schema)
    _seed_if_requested(settings.seed_demo_data)
    yield


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _validate_env()
    _configure_logging()

    from app.config import get_crm_settings

    application = FastAPI(
        title="ScholarCRM API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(get_crm_settings().cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from app.api.routers import (
        auth_router,
        kpi_router,
        report_router,
        stats_router,
        target_router,
        user_router,
    )

    application.include_router(auth_router, prefix=API_PREFIX)
    application.include_router(user_router, prefix=API_PREFIX)
    application.include_router(target_router, prefix=API_PREFIX)
    application.include_router(report_router, prefix=API_PREFIX)
    application.include_router(stats_router, prefix=API_PREFIX)
    application.include_router(kpi_router, prefix=API_PREFIX)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
