"""Shared fixtures: isolated settings, database sessions and an API client."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from challenge_tracker.config import Settings
from challenge_tracker.database import (
    create_engine_from_settings,
    create_session_factory,
    init_models,
)
from challenge_tracker.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        data_dir=tmp_path,
        environment="test",
        database_url="sqlite+aiosqlite:///:memory:",
        logfire_token="",
    )


@pytest.fixture
def run_db(settings):
    """
    Run a coroutine function against a fresh in-memory database.

    Usage:
        def test_something(run_db):
            async def scenario(db):
                ...
            run_db(scenario)
    """

    def run(scenario):
        async def main():
            engine = create_engine_from_settings(settings)
            try:
                await init_models(engine)
                factory = create_session_factory(engine)
                async with factory() as db:
                    return await scenario(db)
            finally:
                await engine.dispose()

        return asyncio.run(main())

    return run


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def user_headers():
    return {"X-User-Id": "1"}


@pytest.fixture
def other_user_headers():
    return {"X-User-Id": "2"}
