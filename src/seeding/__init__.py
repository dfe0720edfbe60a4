"""Idempotent baseline seeding of the store."""
from __future__ import annotations

from seeding.data import DEFAULT_SEED_DATA, SeedDataset, load_dataset
from seeding.failure import EXIT_FAILURE, EXIT_SUCCESS, handle_failure
from seeding.lifecycle import StoreConnection
from seeding.orchestrator import BootstrapOrchestrator
from seeding.reporter import report_summary
from seeding.runner import run_seed
from seeding.writer import UpsertWriter

__all__ = [
    "DEFAULT_SEED_DATA",
    "SeedDataset",
    "load_dataset",
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "handle_failure",
    "StoreConnection",
    "BootstrapOrchestrator",
    "report_summary",
    "run_seed",
    "UpsertWriter",
]
