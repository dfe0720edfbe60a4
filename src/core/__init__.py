"""Core module exports."""
from __future__ import annotations

from core.config import Settings, get_settings, reload_settings
from core.db import (
    Base,
    create_store_engine,
    init_db,
    make_session_factory,
)
from core.exceptions import (
    # Base
    AurixError,
    # Configuration
    ConfigurationError,
    # Database
    DatabaseError,
    ConnectionError,
    WriteFailure,
    MigrationError,
    # Seed
    ValidationError,
    BootstrapError,
)
from core.logging_config import (
    setup_logging,
    get_logger,
    get_context_logger,
    JSONFormatter,
    ContextLogger,
)
from core.models import (
    Account,
    AccountRole,
    CatalogItem,
    Contact,
)
from core.types import SeedSummary

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "reload_settings",
    # Database
    "Base",
    "create_store_engine",
    "init_db",
    "make_session_factory",
    # Models
    "Account",
    "AccountRole",
    "CatalogItem",
    "Contact",
    "SeedSummary",
    # Exceptions - Base
    "AurixError",
    # Exceptions - Config
    "ConfigurationError",
    # Exceptions - Database
    "DatabaseError",
    "ConnectionError",
    "WriteFailure",
    "MigrationError",
    # Exceptions - Seed
    "ValidationError",
    "BootstrapError",
    # Logging
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "JSONFormatter",
    "ContextLogger",
]
