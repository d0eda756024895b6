"""Pydantic request and response schemas."""

from challenge_tracker.schemas.analytics import DaysNeededResponse, PortfolioStatsResponse
from challenge_tracker.schemas.bet import BetCreate, BetResponse, BetResultUpdate
from challenge_tracker.schemas.budget import (
    BudgetCreate,
    BudgetResponse,
    CategoryTotalResponse,
    ExpenseCreate,
    ExpenseResponse,
    LimitUsageResponse,
)
from challenge_tracker.schemas.challenge import (
    ChallengeCreate,
    ChallengeDetailResponse,
    ChallengeProgressResponse,
    ChallengeResponse,
    ChallengeStatusUpdate,
)
from challenge_tracker.schemas.common import BaseSchema, MessageResponse
from challenge_tracker.schemas.habits import HabitsResponse, HabitsUpdate

__all__ = [
    "BaseSchema",
    "MessageResponse",
    # Challenges
    "ChallengeCreate",
    "ChallengeDetailResponse",
    "ChallengeProgressResponse",
    "ChallengeResponse",
    "ChallengeStatusUpdate",
    # Bets
    "BetCreate",
    "BetResponse",
    "BetResultUpdate",
    # Budgets and expenses
    "BudgetCreate",
    "BudgetResponse",
    "CategoryTotalResponse",
    "ExpenseCreate",
    "ExpenseResponse",
    "LimitUsageResponse",
    # Habits
    "HabitsResponse",
    "HabitsUpdate",
    # Analytics
    "DaysNeededResponse",
    "PortfolioStatsResponse",
]
