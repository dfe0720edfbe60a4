"""Seed run sequencing.

Order of a run:
1. Acquire the store connection and validate the dataset
2. Hash the placeholder password
3. Upsert the account, keyed by email
4. Upsert the catalog items concurrently, keyed by id
5. Upsert the contact, keyed by id

The connection is released exactly once however the run ends.
"""
from __future__ import annotations

import uuid
from concurrent.futures import ThreadPoolExecutor, wait
from contextlib import contextmanager
from typing import Any, Callable, Generator, List, Mapping, Optional, Protocol

from sqlalchemy.orm import sessionmaker

from core.auth import hash_password
from core.exceptions import BootstrapError
from core.logging_config import get_context_logger
from core.models import Account, CatalogItem, Contact
from core.types import SeedSummary

from .data import SeedDataset, load_dataset
from .writer import UpsertWriter


class ConnectionManager(Protocol):
    def acquire(self) -> sessionmaker: ...

    def release(self) -> None: ...


class BootstrapOrchestrator:
    """Writes the baseline dataset and summarizes what the store now holds."""

    def __init__(
        self,
        connection: ConnectionManager,
        writer_factory: Callable[[sessionmaker], UpsertWriter] = UpsertWriter,
        hasher: Callable[[str], str] = hash_password,
        raw_dataset: Optional[Mapping[str, Any]] = None,
    ):
        self.connection = connection
        self.writer_factory = writer_factory
        self.hasher = hasher
        self.raw_dataset = raw_dataset
        self.run_id = uuid.uuid4().hex[:12]
        self.logger = get_context_logger(__name__, run_id=self.run_id)

    @contextmanager
    def _connected(self) -> Generator[sessionmaker, None, None]:
        # release() runs even when acquire() itself fails
        try:
            yield self.connection.acquire()
        finally:
            self.connection.release()

    def run(self) -> SeedSummary:
        """
        Execute one seed run.

        Returns:
            SeedSummary with the account email, number of catalog items and
            contact name.

        Raises:
            BootstrapError: wrapping the first failure of any step.
        """
        self.logger.info("Seed run started")
        try:
            with self._connected() as session_factory:
                dataset = load_dataset(self.raw_dataset)
                summary = self._seed(self.writer_factory(session_factory), dataset)
        except Exception as exc:
            self.logger.error("Seed run failed: %s", exc)
            raise BootstrapError(f"Seed failed: {exc}", cause=exc) from exc

        self.logger.info("Seed run finished: %s", summary)
        return summary

    def _seed(self, writer: UpsertWriter, dataset: SeedDataset) -> SeedSummary:
        seed_account = dataset.account
        hashed_password = self.hasher(seed_account.password)

        account = writer.upsert(
            Account,
            {"email": seed_account.email},
            {
                "hashed_password": hashed_password,
                "name": seed_account.name,
                "role": seed_account.role.value,
            },
        )

        items = self._upsert_catalog_items(writer, dataset)

        seed_contact = dataset.contact
        contact = writer.upsert(Contact, {"id": seed_contact.id}, seed_contact.fields())

        return SeedSummary(
            account_email=account.email,
            catalog_item_count=len(items),
            contact_name=contact.name,
        )

    def _upsert_catalog_items(self, writer: UpsertWriter, dataset: SeedDataset) -> List[CatalogItem]:
        """
        Fan out one upsert per item and wait for all of them.

        Every submitted write is awaited before the first error (in dataset
        order) is raised; completed siblings are not undone.
        """
        seeds = dataset.catalog_items
        with ThreadPoolExecutor(max_workers=len(seeds), thread_name_prefix="seed-catalog") as pool:
            futures = [
                pool.submit(writer.upsert, CatalogItem, {"id": seed.id}, seed.fields())
                for seed in seeds
            ]
            wait(futures)
        return [future.result() for future in futures]
