"""Persistence providers: PostgreSQL in production, swappable in tests."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from numtalk.config import Settings
from numtalk.domain.repository import PostRepository
from numtalk.persistence.database import create_engine, create_session_factory
from numtalk.persistence.repository import PostgresPostRepository
from numtalk.util.di.base import ProviderBase
from numtalk.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Mockable component owning ``PostRepository``."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Posts stored in PostgreSQL through one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Session committed when the request finishes cleanly.

        Any exception raised while handling the request rolls it back and
        propagates.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Request session rolled back", error=str(e))
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)
