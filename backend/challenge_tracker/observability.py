"""Logging setup and Logfire initialization."""

import logging
from typing import Optional

import logfire
from fastapi import FastAPI

from challenge_tracker import __version__
from challenge_tracker.config import Settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib logging for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Reduce noise from the database driver
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def initialize_logfire(settings: Settings, app: Optional[FastAPI] = None) -> None:
    """
    Configure Logfire and, when a token is set, instrument the application.

    Without a token Logfire is still configured so that ``logfire.info``
    calls are accepted, but nothing leaves the process.

    Args:
        settings: Application settings containing the Logfire token
        app: FastAPI application to instrument; must not have started yet
    """
    logfire.configure(
        token=settings.logfire_token or None,
        send_to_logfire="if-token-present",
        service_name="challenge-tracker",
        service_version=__version__,
        environment=settings.environment,
        console=False,
    )

    if not settings.logfire_token:
        logger.info("Logfire token not set - observability disabled")
        return

    try:
        if app is not None:
            logfire.instrument_fastapi(app)

        # Bridge Python logging to Logfire
        logging.getLogger().addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire cloud tracking initialized")

    except Exception as e:
        # Observability is optional; keep serving without it
        logger.warning(f"Failed to initialize Logfire: {e}")
