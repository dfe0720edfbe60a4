"""Tests for the create-if-absent writer."""
from __future__ import annotations

import logging
import threading
from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from core.exceptions import WriteFailure
from core.models import CatalogItem, Contact
from seeding.writer import UpsertWriter

ITEM_FIELDS = {
    "name": "Produto Exemplo 1",
    "price": Decimal("100.00"),
    "cost": Decimal("50.00"),
    "stock_current": 20,
    "stock_minimum": 5,
}


def _count(session_factory, model) -> int:
    with session_factory() as session:
        return session.scalar(select(func.count()).select_from(model))


class TestUpsert:
    def test_creates_missing_record(self, session_factory):
        writer = UpsertWriter(session_factory)

        item = writer.upsert(CatalogItem, {"id": "produto-1"}, ITEM_FIELDS)

        assert item.id == "produto-1"
        assert item.price == Decimal("100.00")
        with session_factory() as session:
            stored = session.get(CatalogItem, "produto-1")
            assert stored.name == "Produto Exemplo 1"
            assert stored.stock_minimum == 5

    def test_existing_record_left_unchanged(self, session_factory):
        with session_factory() as session:
            session.add(CatalogItem(
                id="produto-1", name="Renamed", price=Decimal("999.00"),
                cost=Decimal("1.00"), stock_current=0, stock_minimum=0,
            ))
            session.commit()

        writer = UpsertWriter(session_factory)
        item = writer.upsert(CatalogItem, {"id": "produto-1"}, ITEM_FIELDS)

        assert item.name == "Renamed"
        assert item.price == Decimal("999.00")
        assert _count(session_factory, CatalogItem) == 1

    def test_repeated_upsert_keeps_one_record(self, session_factory):
        writer = UpsertWriter(session_factory)
        first = writer.upsert(Contact, {"id": "cliente-1"}, {"name": "Cliente Exemplo"})
        second = writer.upsert(Contact, {"id": "cliente-1"}, {"name": "Someone Else"})

        assert first.name == second.name == "Cliente Exemplo"
        assert _count(session_factory, Contact) == 1

    def test_constraint_violation_is_write_failure(self, session_factory):
        writer = UpsertWriter(session_factory)
        bad = {**ITEM_FIELDS, "price": Decimal("-1.00")}

        with pytest.raises(WriteFailure):
            writer.upsert(CatalogItem, {"id": "produto-x"}, bad)
        assert _count(session_factory, CatalogItem) == 0

    def test_store_error_is_write_failure(self, database_url):
        # No tables: the lookup itself fails
        from core.db import create_store_engine, make_session_factory

        engine = create_store_engine(database_url)
        try:
            writer = UpsertWriter(make_session_factory(engine))
            with pytest.raises(WriteFailure) as exc_info:
                writer.upsert(Contact, {"id": "cliente-1"}, {"name": "Cliente Exemplo"})
            assert isinstance(exc_info.value.__cause__, OperationalError)
        finally:
            engine.dispose()

    def test_key_must_name_one_column(self, session_factory):
        writer = UpsertWriter(session_factory)
        with pytest.raises(ValueError):
            writer.upsert(Contact, {"id": "a", "name": "b"}, {})

    def test_created_record_logged_with_entity(self, session_factory, caplog):
        writer = UpsertWriter(session_factory)
        with caplog.at_level(logging.DEBUG, logger="seeding.writer"):
            writer.upsert(CatalogItem, {"id": "produto-1"}, ITEM_FIELDS)
            writer.upsert(CatalogItem, {"id": "produto-1"}, ITEM_FIELDS)

        records = [r for r in caplog.records if r.name == "seeding.writer"]
        assert len(records) == 2
        assert all(r.entity == "CatalogItem" for r in records)


class RacingWriter(UpsertWriter):
    """Holds every thread after its first lookup until all have looked."""

    def __init__(self, session_factory, barrier: threading.Barrier):
        super().__init__(session_factory)
        self.barrier = barrier
        self.local = threading.local()

    def _find(self, session, model, column, value):
        found = super()._find(session, model, column, value)
        if not getattr(self.local, "waited", False):
            self.local.waited = True
            self.barrier.wait()
        return found


class TestSameKeyRace:
    def test_loser_returns_winners_row(self, session_factory):
        writer = RacingWriter(session_factory, threading.Barrier(2, timeout=10))
        results = {}
        errors = []

        def attempt(name):
            try:
                results[name] = writer.upsert(Contact, {"id": "c"}, {"name": name})
            except Exception as exc:  # surfaced by the assertions below
                errors.append(exc)

        threads = [threading.Thread(target=attempt, args=(name,)) for name in ("A", "B")]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        assert errors == []
        assert results["A"].name == results["B"].name
        with session_factory() as session:
            stored = session.get(Contact, "c")
        assert stored.name == results["A"].name
        assert _count(session_factory, Contact) == 1
