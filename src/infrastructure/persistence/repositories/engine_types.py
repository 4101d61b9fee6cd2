"""SQLAlchemy repository for EngineType entities."""

from __future__ import annotations

from sqlalchemy import func, select

from src.infrastructure.persistence.models.engine_types import EngineType

from .generic import SqlRepository


class SqlEngineTypeRepository(SqlRepository[EngineType]):
    model = EngineType

    async def get_by_name(self, name: str) -> EngineType | None:
        """Return the engine type with the given name (case-insensitive), or None."""
        stmt = select(EngineType).where(func.lower(EngineType.name) == name.lower())
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
