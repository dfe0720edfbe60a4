"""Alembic migrations environment configuration."""
from __future__ import annotations

import os
import sys
from logging.config import fileConfig

from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from alembic import context

# Add src to path for imports when run from a source checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from core.config import get_settings
from core.models import Base

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Only the alembic.ini entry point configures logging; programmatic runs
# keep the application's logging setup.
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# URL handed in by core.migrations wins over settings
DATABASE_URL = config.get_main_option("sqlalchemy.url") or get_settings().database_url

# Check if using SQLite
IS_SQLITE = DATABASE_URL.startswith("sqlite")

target_metadata = Base.metadata


def run_migrations_offline():
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=IS_SQLITE,  # SQLite batch mode for ALTER operations
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    if IS_SQLITE:
        connectable = create_engine(
            DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=NullPool,
        )
    else:
        connectable = create_engine(DATABASE_URL, poolclass=NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=IS_SQLITE,
        )
        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
