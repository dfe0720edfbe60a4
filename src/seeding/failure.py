"""Failure reporting for seed runs."""
from __future__ import annotations

import traceback

import typer

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def handle_failure(exc: BaseException) -> int:
    """
    Dump the full error, chained causes included, to stderr.

    Logging the failure is left to the orchestrator; this only writes the
    traceback.

    Returns:
        The process exit code for a failed run.
    """
    detail = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    typer.echo(detail.rstrip("\n"), err=True)
    return EXIT_FAILURE
