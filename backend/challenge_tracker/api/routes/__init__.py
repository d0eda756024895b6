"""API routes module."""

from challenge_tracker.api.routes.analytics import router as analytics_router
from challenge_tracker.api.routes.bets import router as bets_router
from challenge_tracker.api.routes.budgets import router as budgets_router
from challenge_tracker.api.routes.calculator import router as calculator_router
from challenge_tracker.api.routes.challenges import router as challenges_router
from challenge_tracker.api.routes.habits import router as habits_router

__all__ = [
    "analytics_router",
    "bets_router",
    "budgets_router",
    "calculator_router",
    "challenges_router",
    "habits_router",
]
