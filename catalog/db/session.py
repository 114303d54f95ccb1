"""Async Session Factory — provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Same session options as DatabaseSessionManager (expire_on_commit=False)
    - Meant for scripts and one-off maintenance tasks

Design Decisions:
    - Separate from infrastructure/database.py: no pooling config, no error mapping
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from catalog.db.base import Base


def create_session_factory(
    database_url: str,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for the given database URL."""
    engine = create_async_engine(database_url, echo=False)
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )


async def create_schema(database_url: str) -> None:
    """Create all catalog tables directly (local SQLite runs, no alembic)."""
    import catalog.models  # noqa: F401

    engine = create_async_engine(database_url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()
