"""Concrete SQLAlchemy repository implementations.

Exports the generic SqlRepository, one instantiation per entity kind, and the
get_repositories() factory for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .engine_types import SqlEngineTypeRepository
from .generic import SqlRepository
from .posts import SqlPostRepository
from .users import SqlUserRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession.

    Because they share the session they also share its pending changes, so
    mutations staged through any of them are committed together.
    """

    users: SqlUserRepository
    engine_types: SqlEngineTypeRepository
    posts: SqlPostRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use as a FastAPI dependency:

        async def handler(
            session: AsyncSession = Depends(get_session),
        ) -> ...:
            repos = get_repositories(session)
            found, post = await repos.posts.is_record_exist(post_id)
    """
    return Repositories(
        users=SqlUserRepository(session),
        engine_types=SqlEngineTypeRepository(session),
        posts=SqlPostRepository(session),
    )


__all__ = [
    "SqlRepository",
    "SqlUserRepository",
    "SqlEngineTypeRepository",
    "SqlPostRepository",
    "Repositories",
    "get_repositories",
]
