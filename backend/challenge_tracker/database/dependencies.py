"""
FastAPI dependencies for database sessions, settings and caller identity.
"""

from typing import AsyncGenerator

from fastapi import Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.config import Settings


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides an async database session.

    Usage:
        @router.get("/challenges")
        async def list_challenges(db: AsyncSession = Depends(get_db)):
            ...

    Yields:
        AsyncSession: session from the factory the app built at startup

    Ensures:
        - Session is closed after the request
        - Uncommitted work is rolled back on error
    """
    factory = request.app.state.session_factory
    session = factory()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_current_user_id(
    x_user_id: int = Header(..., alias="X-User-Id", gt=0),
) -> int:
    """
    Caller identity.

    Authentication happens in front of this service; the authenticating
    proxy forwards the user id in the ``X-User-Id`` header.
    """
    return x_user_id
