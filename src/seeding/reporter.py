"""Success summary output."""
from __future__ import annotations

from typing import Callable

import typer

from core.logging_config import get_logger
from core.types import SeedSummary

LOGGER = get_logger(__name__)


def summary_lines(summary: SeedSummary) -> list[str]:
    return [
        "Seed executado com sucesso!",
        f"Usuário criado: {summary.account_email}",
        f"Produtos criados: {summary.catalog_item_count}",
        f"Cliente criado: {summary.contact_name}",
    ]


def report_summary(summary: SeedSummary, echo: Callable[[str], None] = typer.echo) -> None:
    """Print the four-line success summary to stdout."""
    LOGGER.info("Seed summary: %s", summary.as_dict())
    for line in summary_lines(summary):
        echo(line)
