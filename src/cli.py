#!/usr/bin/env python3
"""Command Line Interface for the Aurix seed tooling.

Usage:
    aurix seed       # Write the baseline dataset
    aurix init-db    # Create missing tables
    aurix migrate    # Run Alembic migrations
    aurix info       # Show configuration
"""
from __future__ import annotations

import typer

from core.config import get_settings
from core.logging_config import get_logger, setup_logging

LOGGER = get_logger(__name__)

app = typer.Typer(help="Aurix seed CLI")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """Aurix - baseline data tooling."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, json_format=settings.is_json_logging())


# =============================================================================
# Seed Commands
# =============================================================================


@app.command("seed")
def seed() -> None:
    """Write the baseline account, catalog items and contact."""
    from seeding.runner import run_seed

    code = run_seed()
    if code != 0:
        raise typer.Exit(code)


# =============================================================================
# Schema Commands
# =============================================================================


@app.command("init-db")
def init_database() -> None:
    """Create any missing tables from the ORM models."""
    from core.db import create_store_engine, init_db

    engine = create_store_engine()
    try:
        result = init_db(engine)
    finally:
        engine.dispose()

    created = result["tables_created"]
    if created:
        typer.secho(f"✓ Created tables: {', '.join(created)}", fg="green")
    else:
        typer.echo("All tables already exist.")


@app.command("migrate")
def migrate(
    revision: str = typer.Option("head", help="Target revision"),
) -> None:
    """Run Alembic migrations."""
    from core.exceptions import MigrationError
    from core.migrations import run_migrations

    typer.echo(f"Migrating database to {revision}...")
    try:
        run_migrations(revision=revision)
    except MigrationError as e:
        typer.secho(f"✗ Migration failed: {e}", fg="red", err=True)
        raise typer.Exit(1)
    typer.secho("✓ Migrations complete", fg="green")


# =============================================================================
# Utility Commands
# =============================================================================


@app.command("info")
def show_info() -> None:
    """Show application configuration info."""
    from sqlalchemy.engine import make_url

    settings = get_settings()
    typer.echo("Aurix Configuration:")
    typer.echo(f"  Environment: {settings.environment}")
    typer.echo(f"  Database: {make_url(settings.database_url).render_as_string(hide_password=True)}")
    typer.echo(f"  Log Level: {settings.log_level}")
    typer.echo(f"  Log Format: {settings.log_format}")


if __name__ == "__main__":
    app()
