"""SQLAlchemy implementation of the generic Repository.

SqlRepository[T] is instantiated once per entity kind by subclassing and
setting ``model``.  Every operation goes through the AsyncSession handed in
at construction; the session is the unit of work and owns the pending-change
set shared by all repositories bound to it.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy import Column, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import ColumnProperty, Mapper, make_transient_to_detached
from sqlalchemy.orm.attributes import flag_modified

from src.domain.models.query import QuerySpec
from src.domain.repositories.base import Repository
from src.infrastructure.database import Base

T = TypeVar("T", bound=Base)

logger = logging.getLogger(__name__)


class SqlRepository(Repository[T]):
    model: type[T]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find(self, spec: QuerySpec) -> list[T]:
        stmt = select(self.model)
        if spec.filter is not None:
            stmt = stmt.where(spec.filter)
        # OFFSET/LIMIT are rendered in that order whatever the call order here.
        if spec.skip is not None:
            stmt = stmt.offset(spec.skip)
        if spec.take is not None:
            stmt = stmt.limit(spec.take)
        logger.debug(
            "Querying %s (filtered=%s, paged=%s)",
            self.model.__name__,
            spec.filter is not None,
            spec.is_paged,
        )
        result = await self._session.execute(stmt)
        return list(result.scalars())

    async def get_by_id(self, id: UUID) -> T | None:
        # Session.get consults the identity map before emitting SQL.
        return await self._session.get(self.model, id)

    async def create(self, entity: T) -> None:
        self._session.add(entity)
        logger.debug("Staged insert of %s", self.model.__name__)

    async def update(self, entity: T) -> None:
        state = inspect(entity)
        if state.transient:
            # An instance built by the caller with an existing key replaces the
            # stored row: columns it leaves unset take their defaults.
            for attr in _value_columns(state.mapper):
                if attr.key not in state.dict:
                    setattr(entity, attr.key, _python_default(attr.columns[0]))
            make_transient_to_detached(entity)
        if state.detached:
            self._session.add(entity)
        for attr in _value_columns(state.mapper):
            if attr.key in state.dict:
                flag_modified(entity, attr.key)
        logger.debug("Staged update of %s %s", self.model.__name__, state.identity)

    async def delete(self, entity: T) -> None:
        await self._session.delete(entity)
        # Flush (without committing) so the DELETE is not reordered after
        # INSERTs staged later in the same unit of work.
        await self._session.flush()
        logger.debug("Staged delete of %s", self.model.__name__)


def _value_columns(mapper: Mapper) -> list[ColumnProperty]:
    return [
        attr
        for attr in mapper.column_attrs
        if not any(col.primary_key for col in attr.columns)
    ]


def _python_default(column: Column) -> Any:
    default = column.default
    if default is None:
        return None
    if default.is_callable:
        return default.arg(None)
    if default.is_scalar:
        return default.arg
    return None
