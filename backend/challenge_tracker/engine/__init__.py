"""Challenge balance engine: pure calculations with no I/O."""

from challenge_tracker.engine.analytics import (
    limit_usage,
    spending_by_category,
    summarize_portfolio,
)
from challenge_tracker.engine.balance import (
    FIXED_ODDS_CAP,
    MIN_ODDS,
    accumulated_profit,
    compound_growth,
    compute_bet_profit,
    current_balance,
    days_needed,
    display_balance,
    next_stake,
    ordered_bets,
    progress_percentage,
    resolve_final_status,
    summarize_challenge,
    validate_bet_odds,
    validate_challenge_terms,
)
from challenge_tracker.engine.exceptions import InvalidInputError
from challenge_tracker.engine.money import (
    CENTS_PER_UNIT,
    MAX_CENTS,
    MAX_SCALED_ODDS,
    ODDS_SCALE,
    from_cents,
    odds_to_scaled,
    scaled_to_odds,
    to_cents,
)
from challenge_tracker.engine.types import (
    BetLine,
    BetResult,
    CategoryTotal,
    ChallengeProgress,
    ChallengeStatus,
    ChallengeTerms,
    LimitUsage,
    OddsRule,
    PortfolioStats,
    Strategy,
)

__all__ = [
    # Variants and value types
    "BetLine",
    "BetResult",
    "CategoryTotal",
    "ChallengeProgress",
    "ChallengeStatus",
    "ChallengeTerms",
    "LimitUsage",
    "OddsRule",
    "PortfolioStats",
    "Strategy",
    # Errors
    "InvalidInputError",
    # Fixed-point conversions
    "CENTS_PER_UNIT",
    "MAX_CENTS",
    "MAX_SCALED_ODDS",
    "ODDS_SCALE",
    "from_cents",
    "odds_to_scaled",
    "scaled_to_odds",
    "to_cents",
    # Balance engine
    "FIXED_ODDS_CAP",
    "MIN_ODDS",
    "accumulated_profit",
    "compound_growth",
    "compute_bet_profit",
    "current_balance",
    "days_needed",
    "display_balance",
    "next_stake",
    "ordered_bets",
    "progress_percentage",
    "resolve_final_status",
    "summarize_challenge",
    "validate_bet_odds",
    "validate_challenge_terms",
    # Aggregates
    "limit_usage",
    "spending_by_category",
    "summarize_portfolio",
]
