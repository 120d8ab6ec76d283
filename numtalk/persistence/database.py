"""Engine, sessions and schema bootstrap for the posts store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from numtalk.config import Settings
from numtalk.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine described by ``settings.database``.

    SQL echo follows ``settings.debug``.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory behind the request-scoped sessions.

    Rows returned by ``UPDATE ... RETURNING`` are mapped to domain models
    straight away, so nothing is expired on commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create the posts table and its index, skipping what already exists."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all, checkfirst=True)
