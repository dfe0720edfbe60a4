"""Configuration management for the aurix seed tooling.

All configuration is loaded from environment variables and/or .env file.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Relative paths (.env, SQLite files) are resolved against the working
# directory the command is started from.
ENV_FILE = ".env"
DEFAULT_DATABASE_URL = "sqlite:///./aurix.db"


def _resolve_database_url(url: str) -> str:
    """
    Convert relative SQLite paths to absolute paths under the working directory.

    The resolved URL is what gets logged and shown by `aurix info`, so the
    file being seeded is unambiguous.
    """
    if not url.startswith("sqlite:///"):
        return url

    path_part = url.replace("sqlite:///", "")
    if path_part == ":memory:" or path_part == "":
        return url

    if path_part.startswith("./") or (not path_part.startswith("/") and ":" not in path_part):
        if path_part.startswith("./"):
            path_part = path_part[2:]

        absolute_path = Path.cwd() / path_part
        return f"sqlite:///{absolute_path.as_posix()}"

    return url


class Settings(BaseSettings):
    """
    Runtime configuration powered by environment variables and .env overrides.

    Priority:
    1. Environment variables
    2. .env file in the working directory
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # -------------------------------------------------------------------------
    # Database
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default=DEFAULT_DATABASE_URL,
        alias="DATABASE_URL",
        description="SQLAlchemy connection string.",
    )
    db_pool_size: int = Field(default=5, alias="DB_POOL_SIZE", ge=1)
    db_max_overflow: int = Field(default=10, alias="DB_MAX_OVERFLOW", ge=0)
    db_pool_timeout: int = Field(default=30, alias="DB_POOL_TIMEOUT", ge=1)
    sqlite_busy_timeout_ms: int = Field(default=30000, alias="SQLITE_BUSY_TIMEOUT_MS", ge=0)

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="text", alias="LOG_FORMAT")  # "text" or "json"
    environment: str = Field(default="local", alias="ENVIRONMENT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Ensure log format is valid."""
        lower = v.lower()
        if lower not in {"text", "json"}:
            raise ValueError("log_format must be 'text' or 'json'")
        return lower

    @model_validator(mode="after")
    def resolve_database_url(self) -> "Settings":
        """Convert relative SQLite paths to absolute paths."""
        self.database_url = _resolve_database_url(self.database_url)
        return self

    def is_json_logging(self) -> bool:
        return self.log_format == "json"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached. To reload settings,
    call `get_settings.cache_clear()` first.
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Clear settings cache and reload from environment.

    Useful for testing or after modifying .env file.
    """
    get_settings.cache_clear()
    return get_settings()
