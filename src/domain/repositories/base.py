"""Generic repository base interface.

Repository[T] is the root abstraction for all data-access interfaces.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the mapped entity type; the repository knows nothing about its fields
    beyond the primary key.
  - create(), update() and delete() only stage changes on the shared session.
    Nothing is written until the caller commits the unit of work; a
    repository never commits on its own.
  - Not-found is returned as None (or RecordLookup(False, None)), never raised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, NamedTuple, TypeVar
from uuid import UUID

from src.domain.models.query import QuerySpec

T = TypeVar("T")


class RecordLookup(NamedTuple, Generic[T]):
    """Result of is_record_exist: unpacks as ``found, entity``."""

    found: bool
    entity: T | None


class Repository(ABC, Generic[T]):
    """Abstract CRUD interface for one entity kind."""

    async def get_all(
        self,
        filter: Any = None,
        skip: int | None = None,
        take: int | None = None,
    ) -> list[T]:
        """Return matching entities, skipping then taking as requested.

        With no arguments the whole set for T is returned.  Raises ValueError
        for negative skip/take.
        """
        return await self.find(QuerySpec(filter=filter, skip=skip, take=take))

    @abstractmethod
    async def find(self, spec: QuerySpec) -> list[T]:
        """Return a materialized snapshot of the entities matching spec."""

    @abstractmethod
    async def get_by_id(self, id: UUID) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    async def create(self, entity: T) -> None:
        """Stage a new entity for insertion."""

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Stage a full replace of an existing entity."""

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Stage removal of an entity previously read through this session."""

    async def is_record_exist(self, id: UUID) -> RecordLookup[T]:
        """Look the entity up by id and report whether it was found."""
        entity = await self.get_by_id(id)
        return RecordLookup(entity is not None, entity)
