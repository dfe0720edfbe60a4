"""Store connection lifecycle for a single seed run."""
from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from core.db import check_database_connection, create_store_engine, make_session_factory
from core.exceptions import ConnectionError
from core.logging_config import get_logger

LOGGER = get_logger(__name__)


class StoreConnection:
    """
    Owns the store client handle for the duration of a run.

    `acquire()` builds the engine and proves it can reach the store;
    `release()` disposes of it. The handle is constructed per run and passed
    around explicitly rather than living at module level.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        engine_factory: Callable[..., Engine] = create_store_engine,
    ):
        self.database_url = database_url
        self.engine_factory = engine_factory
        self.engine: Optional[Engine] = None

    def acquire(self) -> sessionmaker:
        """
        Connect to the store.

        Returns:
            Session factory bound to the new engine.

        Raises:
            ConnectionError: if the engine cannot be built or the store
                does not answer.
        """
        try:
            self.engine = self.engine_factory(self.database_url)
        except (SQLAlchemyError, OSError) as exc:
            raise ConnectionError(f"Could not create the database engine: {exc}") from exc

        url = self.engine.url.render_as_string(hide_password=True)
        if not check_database_connection(self.engine):
            raise ConnectionError(f"Could not connect to the database at {url}")

        LOGGER.debug("Connected to %s", url)
        return make_session_factory(self.engine)

    def release(self) -> None:
        """Dispose of the engine, if one was built."""
        if self.engine is None:
            return
        self.engine.dispose()
        LOGGER.debug("Store connection released")
        self.engine = None
