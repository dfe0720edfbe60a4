"""Schema management through Alembic migrations.

The migration scripts ship inside the core package, so this works from a
source checkout and from an installed distribution alike.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import get_settings
from .exceptions import MigrationError
from .logging_config import get_logger

LOGGER = get_logger(__name__)

ALEMBIC_DIR = Path(__file__).resolve().parent / "alembic"


def run_migrations(database_url: Optional[str] = None, revision: str = "head") -> None:
    """
    Run Alembic migrations up to `revision`.

    The Alembic config is built in code so no alembic.ini is needed at runtime;
    the database URL is handed to env.py through the config.
    """
    from alembic import command
    from alembic.config import Config

    url = database_url or get_settings().database_url

    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    # configparser interpolation
    alembic_cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))

    LOGGER.info("Running database migrations to %s...", revision)
    try:
        command.upgrade(alembic_cfg, revision)
    except Exception as exc:
        LOGGER.error("Database migration failed: %s", exc)
        raise MigrationError(f"Migration to {revision} failed: {exc}") from exc
    LOGGER.info("Database migrations complete.")
