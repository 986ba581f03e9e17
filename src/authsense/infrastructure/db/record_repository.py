"""SQLAlchemy adapter for identity-field record lookups."""

from __future__ import annotations

import logging
from typing import Any

import sqlalchemy as sa
from sqlalchemy.orm import Session, sessionmaker

from authsense.application.ports.record_repository_port import RecordRepositoryPort

logger = logging.getLogger(__name__)


class SqlAlchemyRecordRepository(RecordRepositoryPort):
    """Read-only record repository backed by SQLAlchemy sessions.

    ``source`` may be an ORM mapped class, a Core ``Table`` or a ``Select``
    (typically returned by a lookup scope). Sources selecting exactly one ORM
    entity yield entity instances; everything else yields plain dict rows.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_by(self, source: Any, *, field: str, value: Any) -> Any | None:
        """Return the first record in ``source`` whose ``field`` equals ``value``, or None."""

        logger.debug("record_lookup source=%s field=%s", _describe(source), field)

        if isinstance(source, sa.Table):
            statement = sa.select(source).where(source.c[field] == value).limit(1)
        else:
            base = source if isinstance(source, sa.Select) else sa.select(source)
            statement = base.filter_by(**{field: value}).limit(1)

        with self._session_factory() as session:
            if _selects_single_entity(statement):
                return session.scalars(statement).first()
            row = session.execute(statement).mappings().first()
        return None if row is None else dict(row)


def _selects_single_entity(statement: sa.Select) -> bool:
    descriptions = statement.column_descriptions
    if len(descriptions) != 1:
        return False
    entity = descriptions[0]["entity"]
    return entity is not None and descriptions[0]["expr"] is entity


def _describe(source: Any) -> str:
    if isinstance(source, sa.Table):
        return source.name
    if isinstance(source, sa.Select):
        return "scoped_select"
    return getattr(source, "__name__", type(source).__name__)
