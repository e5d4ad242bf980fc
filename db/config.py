"""
Database configuration read from the environment.

ScholarCRM runs against PostgreSQL in the cloud and against PostgreSQL or a
SQLite file on a workstation. The URL is looked up in this order:

1) DATABASE_URL
2) CLOUD_DATABASE_URL, only when ENVIRONMENT names a hosted stage
3) LOCAL_DATABASE_URL
"""

from __future__ import annotations

import os
from pathlib import Path

SUPPORTED_URL_PREFIXES = ("postgresql", "sqlite")

_ENV_FILES = (".env", ".env.local")
_HOSTED_ENVIRONMENTS = frozenset({"cloud", "prod", "production", "staging"})
_PSYCOPG_SCHEMES = {
    "postgres://": "postgresql+psycopg://",
    "postgresql://": "postgresql+psycopg://",
}


def _parse_env_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if line.startswith("export "):
        line = line[len("export "):].lstrip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    return key, value.strip('"').strip("'")


def load_env_files(project_root: Path | None = None) -> None:
    """
    Copy KEY=VALUE pairs from `.env` and `.env.local` into ``os.environ``.

    Variables already set in the process win over both files.
    """

    root = project_root or Path(__file__).resolve().parents[1]
    for filename in _ENV_FILES:
        env_path = root / filename
        if not env_path.is_file():
            continue
        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            parsed = _parse_env_line(raw_line)
            if parsed is not None:
                os.environ.setdefault(*parsed)


def normalize_database_url(url: str) -> str:
    """
    Point bare PostgreSQL URLs at the psycopg 3 driver. Other URLs pass through.
    """

    url = url.strip()
    for prefix, replacement in _PSYCOPG_SCHEMES.items():
        if url.startswith(prefix):
            return replacement + url[len(prefix):]
    return url


def is_supported_database_url(url: str) -> bool:
    return url.startswith(SUPPORTED_URL_PREFIXES)


def resolve_database_url() -> str:
    load_env_files()

    environment = os.getenv("ENVIRONMENT", "local").strip().lower()
    candidates = ["DATABASE_URL"]
    if environment in _HOSTED_ENVIRONMENTS:
        candidates.append("CLOUD_DATABASE_URL")
    candidates.append("LOCAL_DATABASE_URL")

    for name in candidates:
        value = os.getenv(name, "").strip()
        if value:
            return normalize_database_url(value)

    raise RuntimeError(
        "No database URL configured. Set DATABASE_URL, or configure "
        "LOCAL_DATABASE_URL / CLOUD_DATABASE_URL."
    )
