"""
Main FastAPI application for the challenge tracker.

``create_app`` builds an application around an explicit ``Settings``:
- the async database engine and session factory live on ``app.state``
- CORS is configured from ``allowed_origins``
- Logfire is initialized before the app starts serving
- domain errors are mapped onto HTTP responses
"""

from contextlib import asynccontextmanager
from typing import Dict, Optional

import logfire
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from challenge_tracker import __version__
from challenge_tracker.api.errors import register_exception_handlers
from challenge_tracker.api.routes import (
    analytics_router,
    bets_router,
    budgets_router,
    calculator_router,
    challenges_router,
    habits_router,
)
from challenge_tracker.config import Settings, get_settings
from challenge_tracker.database import (
    check_db_connection,
    create_engine_from_settings,
    create_session_factory,
    get_db_info,
    init_models,
)
from challenge_tracker.observability import initialize_logfire


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Builds the database engine on startup and disposes of it on shutdown.
    """
    settings: Settings = app.state.settings

    logfire.info(
        "Starting Challenge Tracker API",
        environment=settings.environment,
        debug=settings.debug,
    )

    engine = create_engine_from_settings(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    if settings.database_auto_create:
        await init_models(engine)

    db_info = get_db_info(settings)
    if await check_db_connection(engine):
        logfire.info("Database connection successful", url=db_info["url"])
    else:
        logfire.error("Database connection failed", url=db_info["url"])

    logfire.info("Challenge Tracker API startup complete")

    yield

    logfire.info("Shutting down Challenge Tracker API")
    await engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application; defaults to the cached process settings."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Challenge Tracker API",
        description="Betting challenge tracker: compounding challenges, budgets and limits",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings

    initialize_logfire(settings, app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # ========================================================================
    # Health Check Endpoints
    # ========================================================================

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request) -> Dict[str, str]:
        """Health status of the application and database."""
        db_connected = await check_db_connection(request.app.state.engine)

        return {
            "status": "healthy" if db_connected else "degraded",
            "service": "challenge-tracker-api",
            "version": __version__,
            "database": "connected" if db_connected else "disconnected",
            "environment": settings.environment,
        }

    @app.get("/", tags=["Root"])
    async def root() -> Dict[str, str]:
        return {
            "name": "Challenge Tracker API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    # ========================================================================
    # API Routers
    # ========================================================================

    app.include_router(challenges_router)
    app.include_router(bets_router)
    app.include_router(calculator_router)
    app.include_router(budgets_router)
    app.include_router(habits_router)
    app.include_router(analytics_router)

    return app
