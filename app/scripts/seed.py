"""
Seed an empty database with demo users and vehicles. Run from project root:

  python -m app.scripts.seed [--create-tables]

--create-tables creates missing tables from the ORM models first (handy with
sqlite:// for local runs); otherwise run `alembic upgrade head` beforehand.
"""

import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal, engine
from app.models import Base
from app.services.seed import seed_initial_data

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Insert seed data when the database is empty.")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables from the ORM models before seeding",
    )
    args = parser.parse_args()

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    settings = get_settings()
    db = SessionLocal()
    try:
        inserted = seed_initial_data(db, rounds=settings.BCRYPT_ROUNDS)
        logger.info("Seeding completed: inserted=%s", inserted)
        return 0
    except Exception as e:
        db.rollback()
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
