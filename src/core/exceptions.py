"""Custom exceptions for the aurix seed tooling."""
from __future__ import annotations

from typing import Optional


class AurixError(Exception):
    """Base exception for all application errors."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AurixError):
    """Raised when required configuration is missing or invalid."""

    pass


# =============================================================================
# Database Errors
# =============================================================================


class DatabaseError(AurixError):
    """Base exception for database-related errors."""

    pass


class ConnectionError(DatabaseError):
    """Raised when the store connection cannot be acquired."""

    pass


class WriteFailure(DatabaseError):
    """Raised when a single upsert fails (constraint violation, store error)."""

    pass


class MigrationError(DatabaseError):
    """Raised when database migration fails."""

    pass


# =============================================================================
# Seed Errors
# =============================================================================


class ValidationError(AurixError):
    """Raised when seed data falls outside the allowed ranges."""

    pass


class BootstrapError(AurixError):
    """
    Raised by the seed orchestrator when a run fails.

    Wraps the first underlying failure, which is also chained as __cause__.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


__all__ = [
    # Base
    "AurixError",
    # Configuration
    "ConfigurationError",
    # Database
    "DatabaseError",
    "ConnectionError",
    "WriteFailure",
    "MigrationError",
    # Seed
    "ValidationError",
    "BootstrapError",
]
