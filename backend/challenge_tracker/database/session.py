"""
Async engine and session factory construction.

Nothing here is held in module globals: the application builds one engine in
its lifespan and keeps it on ``app.state``; scripts and tests build their own.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from challenge_tracker.config import Settings
from challenge_tracker.database.base import Base

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for ``settings.database_url``.

    SQLite URLs get a single shared connection when in-memory (so every
    session sees the same database); server databases get a bounded pool.
    """
    url = make_url(settings.database_url)

    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_async_engine(url, echo=settings.database_echo, **kwargs)

    return create_async_engine(
        url,
        echo=settings.database_echo,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory bound to ``engine``."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create any missing tables."""
    # Importing the package registers every model on Base.metadata
    import challenge_tracker.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_db_connection(engine: AsyncEngine) -> bool:
    """Check if the database answers a trivial query."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Database health check failed: {e}")
        return False


def get_db_info(settings: Settings) -> dict:
    """Database connection information with the password hidden."""
    url = make_url(settings.database_url)
    return {
        "url": url.render_as_string(hide_password=True),
        "backend": url.get_backend_name(),
        "database": url.database,
        "environment": settings.environment,
    }


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """
    Async context manager for sessions outside a request (CLI, scripts).

    Usage:
        async with session_scope(factory) as db:
            await db.execute(select(Challenge))
            await db.commit()
    """
    session = factory()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
