"""SQLAlchemy repository for Post entities."""

from __future__ import annotations

from uuid import UUID

from src.infrastructure.persistence.models.posts import Post

from .generic import SqlRepository


class SqlPostRepository(SqlRepository[Post]):
    model = Post

    async def list_by_author(
        self,
        author_id: UUID,
        skip: int | None = None,
        take: int | None = None,
    ) -> list[Post]:
        return await self.get_all(Post.author_id == author_id, skip=skip, take=take)
