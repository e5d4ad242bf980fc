"""
Create the CRM tables (optionally) and load demo data from the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging

from app.services.seed_service import seed_demo_data
from db.session import SessionLocal, get_engine


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed ScholarCRM demo users, targets, reports and KPIs.")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables first instead of relying on Alembic.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    if args.create_schema:
        import db.models  # noqa: F401  registers all ORM models on Base.metadata
        from db.base import Base

        Base.metadata.create_all(get_engine())

    with SessionLocal() as db:
        seeded = seed_demo_data(db)
        db.commit()

    print(json.dumps({"seeded": seeded}, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
