from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)

from blog_api.config import get_settings


# The engine is built lazily (first request / startup) rather than at import time,
# so importing the app never needs a database driver or a reachable server.
@lru_cache()
def get_engine() -> AsyncEngine:
    settings = get_settings()
    return create_async_engine(
        settings.SQLALCHEMY_DATABASE_URL,
        echo=settings.SQLALCHEMY_ECHO,   # Set to False in production
        pool_pre_ping=True,              # Enables connection health checks
    )


@lru_cache()
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: rows stay readable after commit (they are mapped to
    # domain objects before the response is built anyway).
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. One session (and one transaction) per request.

    Commits when the endpoint returns normally and rolls back when it raises, so a
    request either persists its single mutation or nothing.

    Usage:
        async def endpoint(db: AsyncSession = Depends(get_async_session)):
            await db.execute(...)
    """
    async with get_sessionmaker()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def dispose_engine() -> None:
    """Close pooled connections (called on application shutdown)."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
