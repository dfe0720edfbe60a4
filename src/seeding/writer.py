"""Create-if-absent writes keyed by a unique column."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.db import Base
from core.exceptions import WriteFailure
from core.logging_config import get_logger

LOGGER = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class UpsertWriter:
    """
    Upserts whose update branch is empty.

    Each call runs in its own session and commits on its own, so calls with
    distinct keys can be made from different threads at the same time.

    Usage:
        writer = UpsertWriter(session_factory)
        item = writer.upsert(CatalogItem, {"id": "produto-1"}, {"name": ...})
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def upsert(
        self,
        model: Type[ModelT],
        key: Mapping[str, Any],
        fields: Mapping[str, Any],
    ) -> ModelT:
        """
        Return the record for `key`, creating it from `fields` if absent.

        An existing record is returned untouched, whatever `fields` says.

        Args:
            model: Mapped class to write.
            key: Single-item mapping of unique column name to value.
            fields: Remaining column values for a new record.

        Returns:
            The existing or newly created record (detached).

        Raises:
            WriteFailure: if the store rejects the read or the insert.
        """
        if len(key) != 1:
            raise ValueError(f"upsert key must name exactly one column, got {list(key)}")
        (column, value), = key.items()
        entity = model.__name__

        session: Session = self.session_factory()
        try:
            existing = self._find(session, model, column, value)
            if existing is not None:
                LOGGER.debug("%s %s=%s already present, leaving unchanged", entity, column, value,
                             extra={"entity": entity})
                return existing

            record = model(**{**fields, column: value})
            session.add(record)
            try:
                session.commit()
            except IntegrityError as exc:
                # Another writer may have created the same key first.
                session.rollback()
                existing = self._find(session, model, column, value)
                if existing is None:
                    raise WriteFailure(
                        f"Could not create {entity} {column}={value}: {exc.orig}"
                    ) from exc
                LOGGER.debug("%s %s=%s created concurrently, using stored row", entity, column, value,
                             extra={"entity": entity})
                return existing

            LOGGER.info("Created %s %s=%s", entity, column, value, extra={"entity": entity})
            return record
        except SQLAlchemyError as exc:
            session.rollback()
            raise WriteFailure(f"Upsert of {entity} {column}={value} failed: {exc}") from exc
        finally:
            session.close()

    @staticmethod
    def _find(session: Session, model: Type[ModelT], column: str, value: Any) -> Optional[ModelT]:
        stmt = select(model).where(getattr(model, column) == value)
        return session.scalars(stmt).first()
