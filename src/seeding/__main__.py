"""Seed entrypoint.

Usage:
    aurix-seed
    python -m seeding
"""
from __future__ import annotations

import sys

from core.config import get_settings
from core.logging_config import get_logger, setup_logging
from seeding.runner import run_seed

LOGGER = get_logger(__name__)


def main() -> None:
    """Seed the store and exit with the run's status code."""
    settings = get_settings()
    setup_logging(level=settings.log_level, json_format=settings.is_json_logging())
    LOGGER.info("Starting seed...")
    sys.exit(run_seed())


if __name__ == "__main__":
    main()
