"""Database models module."""

from challenge_tracker.models.bet import Bet
from challenge_tracker.models.budget import Budget, BudgetPeriod, BudgetStatus, Expense
from challenge_tracker.models.challenge import Challenge
from challenge_tracker.models.gambling_habits import GamblingHabits

__all__ = [
    "Bet",
    "Budget",
    "BudgetPeriod",
    "BudgetStatus",
    "Challenge",
    "Expense",
    "GamblingHabits",
]
