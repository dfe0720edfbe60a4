"""Database engine construction and session factories.

Nothing here is created at import time: callers build an engine for a run,
hand out sessions from it, and dispose of it when they are done.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from .config import Settings, get_settings
from .logging_config import get_logger

LOGGER = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_store_engine(
    database_url: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Engine:
    """
    Create an engine for the given URL (defaults to DATABASE_URL).

    SQLite gets NullPool plus WAL and a busy timeout so that concurrent
    writers from worker threads wait for the lock instead of failing.
    Other backends get a regular pool with pre-ping.
    """
    settings = settings or get_settings()
    url = database_url or settings.database_url

    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},  # Allow multi-threaded access
            poolclass=NullPool,
        )
        busy_timeout = settings.sqlite_busy_timeout_ms

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute(f"PRAGMA busy_timeout={busy_timeout}")
            cursor.close()

        return engine

    return create_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,  # Verify connection before usage
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    """
    Session factory for an engine.

    expire_on_commit is off so records returned from a closed session
    keep their loaded attributes.
    """
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def check_database_connection(engine: Engine) -> bool:
    """
    Verify database connectivity.

    Returns:
        True if connection successful, False otherwise.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as exc:
        LOGGER.error("Database connection check failed: %s", exc)
        return False


def init_db(engine: Engine) -> dict:
    """
    Create any missing tables.

    Existing tables are never altered; use migrations for schema changes.

    Returns:
        Dict with initialization results.
    """
    # Import models to ensure they are registered with Base
    from . import models  # noqa: F401

    result = {
        "status": "success",
        "tables_created": [],
        "tables_existing": [],
    }

    existing_tables = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    new_tables = set(inspect(engine).get_table_names())

    result["tables_created"] = sorted(new_tables - existing_tables)
    result["tables_existing"] = sorted(existing_tables)

    return result
