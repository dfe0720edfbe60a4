"""Pytest configuration and fixtures."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import pytest
from sqlalchemy import select

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Set test environment
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from core.config import reload_settings
from core.db import create_store_engine, init_db, make_session_factory
from core.models import Account, CatalogItem, Contact


class InstrumentedConnection:
    """StoreConnection stand-in that counts acquire/release calls."""

    def __init__(self, session_factory=None, error: Optional[Exception] = None):
        self.session_factory = session_factory
        self.error = error
        self.acquire_calls = 0
        self.release_calls = 0

    def acquire(self):
        self.acquire_calls += 1
        if self.error is not None:
            raise self.error
        return self.session_factory

    def release(self) -> None:
        self.release_calls += 1


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop console handlers that setup_logging attached during a test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


@pytest.fixture
def database_url(tmp_path) -> str:
    """URL of an empty file-backed SQLite database."""
    return f"sqlite:///{(tmp_path / 'aurix_test.db').as_posix()}"


@pytest.fixture
def engine(database_url):
    """Engine with the schema created; disposed after the test."""
    engine = create_store_engine(database_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def seeded_env(monkeypatch, database_url, engine):
    """Point DATABASE_URL at the test database for code that reads settings."""
    monkeypatch.setenv("DATABASE_URL", database_url)
    reload_settings()
    yield database_url
    monkeypatch.undo()
    reload_settings()


def snapshot(session_factory) -> dict:
    """All seeded rows as plain tuples, keyed by table."""
    with session_factory() as session:
        return {
            "account": [
                (a.email, a.hashed_password, a.name, a.role)
                for a in session.scalars(select(Account).order_by(Account.email))
            ],
            "catalog_item": [
                (c.id, c.name, c.price, c.cost, c.stock_current, c.stock_minimum)
                for c in session.scalars(select(CatalogItem).order_by(CatalogItem.id))
            ],
            "contact": [
                (c.id, c.name, c.phone, c.notes)
                for c in session.scalars(select(Contact).order_by(Contact.id))
            ],
        }
