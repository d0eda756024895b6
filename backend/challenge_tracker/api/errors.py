"""Exception handlers mapping domain errors onto HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from challenge_tracker.engine import InvalidInputError
from challenge_tracker.services import TrackerError

logger = logging.getLogger(__name__)


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    content = {"detail": str(exc)}
    if exc.field:
        content["field"] = exc.field
    return JSONResponse(status_code=400, content=content)


async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain exception handlers on ``app``."""
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(TrackerError, tracker_error_handler)
