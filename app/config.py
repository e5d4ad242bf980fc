"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from db.config import load_env_files

_ALLOWED_APP_MODES = {"local", "cloud"}


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _require_app_mode() -> str:
    """
    Read and validate APP_MODE from the environment.

    Defaults to 'local'. Any value outside the allowed set raises
    RuntimeError.
    """

    _load_env_once()
    mode = os.getenv("APP_MODE", "local").strip().lower() or "local"
    if mode not in _ALLOWED_APP_MODES:
        raise RuntimeError(
            f"APP_MODE '{mode}' is not valid. "
            f"Allowed values: {sorted(_ALLOWED_APP_MODES)}."
        )
    return mode


@dataclass(frozen=True)
class AppSettings:
    """
    Top-level application mode settings.
    """

    mode: str


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    return AppSettings(mode=_require_app_mode())


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_float_env(name: str, default: float) -> float:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """
    Read a comma-separated list; blank entries are dropped.
    """

    raw_value = _get_str_env(name, "")
    if not raw_value:
        return default
    return tuple(item.strip() for item in raw_value.split(",") if item.strip())


@dataclass(frozen=True)
class CRMSettings:
    """
    Runtime behaviour switches for the CRM API.
    """

    seed_demo_data: bool = False
    auto_create_schema: bool = False
    strict_kpi_keys: bool = False
    cors_allow_origins: tuple[str, ...] = ("http://localhost:8501",)


@dataclass(frozen=True)
class FrontendSettings:
    """
    Settings for the Streamlit frontend's API client.
    """

    api_base_url: str = "http://localhost:8000/api"
    timeout_seconds: float = 10.0


@lru_cache(maxsize=1)
def get_crm_settings() -> CRMSettings:
    """
    Return cached CRM settings from environment variables.
    """

    return CRMSettings(
        seed_demo_data=_get_bool_env("SEED_DEMO_DATA", False),
        auto_create_schema=_get_bool_env("DB_AUTO_CREATE", False),
        strict_kpi_keys=_get_bool_env("STRICT_KPI_KEYS", False),
        cors_allow_origins=_get_list_env("CORS_ALLOW_ORIGINS", ("http://localhost:8501",)),
    )


@lru_cache(maxsize=1)
def get_frontend_settings() -> FrontendSettings:
    return FrontendSettings(
        api_base_url=_get_str_env("CRM_API_BASE_URL", "http://localhost:8000/api").rstrip("/"),
        timeout_seconds=max(1.0, _get_float_env("CRM_API_TIMEOUT_SECONDS", 10.0)),
    )
