"""Process-level seed entry point."""
from __future__ import annotations

from typing import Optional

from core.config import get_settings
from core.exceptions import BootstrapError

from .failure import EXIT_SUCCESS, handle_failure
from .lifecycle import StoreConnection
from .orchestrator import BootstrapOrchestrator, ConnectionManager
from .reporter import report_summary


def run_seed(
    connection: Optional[ConnectionManager] = None,
    orchestrator: Optional[BootstrapOrchestrator] = None,
) -> int:
    """
    Run the seed once and report the outcome.

    The connection is already released by the time either report is written.

    Returns:
        0 on success, 1 on any failure.
    """
    if orchestrator is None:
        if connection is None:
            connection = StoreConnection(get_settings().database_url)
        orchestrator = BootstrapOrchestrator(connection)

    try:
        summary = orchestrator.run()
    except BootstrapError as exc:
        return handle_failure(exc)

    report_summary(summary)
    return EXIT_SUCCESS
