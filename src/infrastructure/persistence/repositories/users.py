"""SQLAlchemy repository for User entities."""

from __future__ import annotations

from sqlalchemy import func, select

from src.infrastructure.persistence.models.users import User

from .generic import SqlRepository


class SqlUserRepository(SqlRepository[User]):
    model = User

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(User).where(func.lower(User.username) == username.lower())
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
