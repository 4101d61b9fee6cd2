"""Unit of work: one session, all repositories, one commit point.

Usage:

    async with UnitOfWork() as uow:
        found, post = await uow.repositories.posts.is_record_exist(post_id)
        if found:
            await uow.repositories.posts.delete(post)
            await uow.save()

Anything staged but not saved when the block exits is discarded with the
session.
"""

from __future__ import annotations

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.infrastructure.database import AsyncSessionLocal
from src.infrastructure.persistence.repositories import Repositories, get_repositories

logger = logging.getLogger(__name__)


class UnitOfWork:
    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal
    ) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None
        self._repositories: Repositories | None = None
        self._flushed = False

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork used outside of 'async with'")
        return self._session

    @property
    def repositories(self) -> Repositories:
        if self._repositories is None:
            raise RuntimeError("UnitOfWork used outside of 'async with'")
        return self._repositories

    @property
    def has_pending_changes(self) -> bool:
        session = self.session
        # Autoflush moves staged rows out of new/dirty/deleted before commit.
        return self._flushed or bool(session.new or session.dirty or session.deleted)

    async def __aenter__(self) -> UnitOfWork:
        self._session = self._session_factory()
        self._repositories = get_repositories(self._session)
        self._flushed = False
        sync_session = self._session.sync_session
        event.listen(sync_session, "after_flush", self._on_flush)
        event.listen(sync_session, "after_commit", self._on_transaction_end)
        event.listen(sync_session, "after_rollback", self._on_transaction_end)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is None and self.has_pending_changes:
                logger.warning("Unit of work closed with unsaved changes; discarding them")
            await self.session.close()
        finally:
            self._session = None
            self._repositories = None

    def _on_flush(self, session, flush_context) -> None:
        self._flushed = True

    def _on_transaction_end(self, session) -> None:
        self._flushed = False

    async def save(self) -> None:
        """Commit every change staged through this unit of work, atomically."""
        logger.debug("Committing unit of work")
        await self.session.commit()

    async def rollback(self) -> None:
        """Discard every change staged since the last save."""
        logger.debug("Rolling back unit of work")
        await self.session.rollback()
