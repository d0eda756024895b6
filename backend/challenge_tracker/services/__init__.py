"""Services module."""

from challenge_tracker.services.analytics_service import analytics_service
from challenge_tracker.services.bet_service import bet_service
from challenge_tracker.services.budget_service import budget_service
from challenge_tracker.services.challenge_service import challenge_service
from challenge_tracker.services.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    TrackerError,
)
from challenge_tracker.services.habits_service import habits_service

__all__ = [
    "analytics_service",
    "bet_service",
    "budget_service",
    "challenge_service",
    "habits_service",
    # Errors
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "TrackerError",
]
