"""Closed variants and value types consumed by the balance engine."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Protocol


class Strategy(str, Enum):
    """Stake progression strategy, fixed when a challenge is created."""

    COMPOUND = "compound"
    TAKE_PROFIT = "take-profit"


class BetResult(str, Enum):
    """Bet result; leaves PENDING exactly once."""

    PENDING = "pending"
    WIN = "win"
    LOSS = "loss"


class ChallengeStatus(str, Enum):
    """Challenge lifecycle; leaves ACTIVE exactly once."""

    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


class OddsRule(str, Enum):
    """Which upper bound applies to the odds of a newly added bet."""

    CHALLENGE_CEILING = "challenge-ceiling"
    FIXED_CAP = "fixed-cap"


class BetLike(Protocol):
    day_number: int
    stake_amount: int
    odds: int
    result: BetResult
    profit: int


class ChallengeLike(Protocol):
    initial_stake: int
    target_amount: int
    odds: int
    days_total: int
    strategy: Strategy


@dataclass(frozen=True)
class BetLine:
    """Plain bet record, e.g. for projections and tests."""

    day_number: int
    stake_amount: int
    odds: int
    result: BetResult = BetResult.PENDING
    profit: int = 0


@dataclass(frozen=True)
class ChallengeTerms:
    """Plain challenge configuration."""

    initial_stake: int
    target_amount: int
    odds: int
    days_total: int
    strategy: Strategy = Strategy.COMPOUND


@dataclass(frozen=True)
class ChallengeProgress:
    """Derived figures for one challenge at a point in its bet history."""

    current_balance: int
    display_balance: int
    accumulated_profit: int
    next_stake: int
    progress_percentage: Decimal
    settled_bets: int
    wins: int
    losses: int
    next_day_number: int
    plan_complete: bool


@dataclass(frozen=True)
class PortfolioStats:
    """Aggregate results across every challenge of a user."""

    total_profit: int
    total_loss: int
    net_profit: int
    total_bets: int
    win_bets: int
    win_rate: Decimal
    total_staked: int
    roi: Decimal


@dataclass(frozen=True)
class LimitUsage:
    """How much of a spending limit has been used."""

    spent: int
    limit: int
    percentage: Decimal
    display_percentage: Decimal
    exceeded: bool
    alert: bool


@dataclass(frozen=True)
class CategoryTotal:
    category: str
    amount: int
    percentage: Decimal
