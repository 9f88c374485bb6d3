"""Database engine and session management."""

from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, settings


def build_engine(config: Settings) -> Engine:
    """Create the engine for config.DATABASE_URL (in-memory SQLite shares one connection)."""
    url = config.DATABASE_URL
    if url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=config.DEBUG,
        )
    if url.startswith("sqlite://"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=config.DEBUG,
        )
    return create_engine(
        url,
        pool_pre_ping=True,
        echo=config.DEBUG,
    )


engine = build_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


def is_unique_violation(exc: IntegrityError, table: str, column: str) -> bool:
    """
    True when exc was raised by the unique index on table.column.
    PostgreSQL names the index (ix_<table>_<column>); SQLite names the column.
    """
    message = str(exc.orig)
    return (
        f"ix_{table}_{column}" in message
        or f"UNIQUE constraint failed: {table}.{column}" in message
    )
