"""Challenge balance engine.

Pure functions over a challenge's configuration and its bet history. Money is
integer cents and odds are integers scaled by 100 (see ``engine.money``).
Nothing here performs I/O, keeps state or logs; every precondition failure is
raised as ``InvalidInputError`` before any arithmetic happens.

Strategies:
- compound: the whole balance is staked again on the next bet
- take-profit: the stake stays at the initial stake and winnings are
  tracked separately as accumulated profit
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from typing import Iterable, Sequence, Union, assert_never

from challenge_tracker.engine.exceptions import InvalidInputError
from challenge_tracker.engine.money import (
    MAX_CENTS,
    MAX_SCALED_ODDS,
    ODDS_SCALE,
    from_cents,
    scaled_to_odds,
)
from challenge_tracker.engine.types import (
    BetLike,
    BetResult,
    ChallengeLike,
    ChallengeProgress,
    ChallengeStatus,
    OddsRule,
    Strategy,
)

Amount = Union[int, Decimal]

MIN_ODDS = 101
FIXED_ODDS_CAP = 130

_HUNDRED = Decimal(100)
_WHOLE = Decimal(1)


def coerce_result(bet: BetLike) -> BetResult:
    """Return the bet result as a BetResult member."""
    try:
        return BetResult(bet.result)
    except ValueError:
        raise InvalidInputError(f"Unknown bet result: {bet.result!r}", field="result")


def _strategy_of(challenge: ChallengeLike) -> Strategy:
    try:
        return Strategy(challenge.strategy)
    except ValueError:
        raise InvalidInputError(
            f"Unknown strategy: {challenge.strategy!r}", field="strategy"
        )


def ordered_bets(bets: Iterable[BetLike]) -> list[BetLike]:
    """Return bets sorted by day number."""
    return sorted(bets, key=lambda bet: bet.day_number)


def current_balance(initial_stake: int, bets: Iterable[BetLike]) -> int:
    """Fold settled bets into the stake as if everything were reinvested.

    The stake of a bet is part of the balance it was drawn from, so a win adds
    only the profit and a loss removes the stake.
    """
    balance = initial_stake
    for bet in ordered_bets(bets):
        result = coerce_result(bet)
        match result:
            case BetResult.WIN:
                balance += bet.profit
            case BetResult.LOSS:
                balance -= bet.stake_amount
            case BetResult.PENDING:
                pass
            case _:
                assert_never(result)
    return balance


def accumulated_profit(bets: Iterable[BetLike]) -> int:
    """Profit tracked separately from the untouched initial stake."""
    profit = 0
    for bet in ordered_bets(bets):
        result = coerce_result(bet)
        match result:
            case BetResult.WIN:
                profit += bet.profit
            case BetResult.LOSS:
                profit -= bet.stake_amount
            case BetResult.PENDING:
                pass
            case _:
                assert_never(result)
    return profit


def display_balance(challenge: ChallengeLike, bets: Sequence[BetLike]) -> int:
    """The balance shown to the user and compared against the target."""
    strategy = _strategy_of(challenge)
    match strategy:
        case Strategy.COMPOUND:
            return current_balance(challenge.initial_stake, bets)
        case Strategy.TAKE_PROFIT:
            return challenge.initial_stake + accumulated_profit(bets)
        case _:
            assert_never(strategy)


def next_stake(challenge: ChallengeLike, bets: Sequence[BetLike]) -> int:
    """Stake for the next bet; frozen into the bet once it is created."""
    strategy = _strategy_of(challenge)
    match strategy:
        case Strategy.COMPOUND:
            return current_balance(challenge.initial_stake, bets)
        case Strategy.TAKE_PROFIT:
            return challenge.initial_stake
        case _:
            assert_never(strategy)


def progress_percentage(
    balance: Amount, target_amount: Amount, clamp: bool = True
) -> Decimal:
    """Progress toward the target, clamped at 100 unless ``clamp`` is False."""
    if target_amount <= 0:
        raise InvalidInputError(
            f"Target amount must be positive, got {target_amount}",
            field="target_amount",
        )

    ratio = Decimal(balance) / Decimal(target_amount) * _HUNDRED
    if clamp:
        return min(ratio, _HUNDRED)
    return ratio


def compute_bet_profit(stake_amount: int, odds: int, result: BetResult) -> int:
    """Profit frozen onto a bet at the moment it leaves PENDING.

    A win pays ``stake * (odds - 1)`` rounded half-up to the cent; a loss
    forfeits the stake.
    """
    if stake_amount <= 0:
        raise InvalidInputError(
            f"Stake must be positive, got {stake_amount}", field="stake_amount"
        )
    if odds <= ODDS_SCALE:
        raise InvalidInputError(
            f"Odds must be greater than 1.00, got {scaled_to_odds(odds)}",
            field="odds",
        )
    try:
        result = BetResult(result)
    except ValueError:
        raise InvalidInputError(f"Unknown bet result: {result!r}", field="result")

    match result:
        case BetResult.WIN:
            winnings = Decimal(stake_amount) * (Decimal(odds) - ODDS_SCALE) / ODDS_SCALE
            return int(winnings.quantize(_WHOLE, rounding=ROUND_HALF_UP))
        case BetResult.LOSS:
            return -stake_amount
        case BetResult.PENDING:
            raise InvalidInputError(
                "Profit is only computed when a bet is settled as win or loss",
                field="result",
            )
        case _:
            assert_never(result)


def compound_growth(stake: Amount, odds: int, days: int) -> Fraction:
    """Exact value of ``stake * odds ** days`` with no per-day rounding."""
    if days < 0:
        raise InvalidInputError(f"Days cannot be negative, got {days}", field="days")
    return Fraction(stake) * Fraction(odds, ODDS_SCALE) ** days


def days_needed(stake: Amount, target: Amount, odds: int) -> int:
    """Smallest number of compounding wins that takes ``stake`` to ``target``.

    Solves ``target = stake * odds ** days`` and rounds up, since a fractional
    day can not be played. The logarithmic estimate is then checked against
    exact rational compounding so float error never shifts the answer.
    """
    if stake <= 0:
        raise InvalidInputError(f"Stake must be positive, got {stake}", field="stake")
    if target <= stake:
        raise InvalidInputError(
            "Target amount must be greater than the stake", field="target"
        )
    if odds <= ODDS_SCALE:
        raise InvalidInputError(
            f"Odds must be greater than 1.00, got {scaled_to_odds(odds)}",
            field="odds",
        )

    ratio = Fraction(target) / Fraction(stake)
    multiplier = Fraction(odds, ODDS_SCALE)
    days = max(1, math.ceil(math.log(ratio) / math.log(multiplier)))

    while days > 1 and multiplier ** (days - 1) >= ratio:
        days -= 1
    while multiplier ** days < ratio:
        days += 1
    return days


def validate_challenge_terms(
    initial_stake: int, target_amount: int, odds: int, days_total: int
) -> None:
    """Check the configuration of a new challenge."""
    if initial_stake <= 0:
        raise InvalidInputError(
            "Please enter a valid initial stake", field="initial_stake"
        )
    if target_amount <= initial_stake:
        raise InvalidInputError(
            "Target amount must be greater than initial stake", field="target_amount"
        )
    if odds <= ODDS_SCALE:
        raise InvalidInputError("Odds must be greater than 1.0", field="odds")
    if days_total <= 0:
        raise InvalidInputError(
            "Please enter a valid number of days", field="days_total"
        )
    if target_amount > MAX_CENTS:
        raise InvalidInputError(
            f"Target amount cannot exceed {from_cents(MAX_CENTS):,}",
            field="target_amount",
        )
    if odds > MAX_SCALED_ODDS:
        raise InvalidInputError(
            f"Odds cannot exceed {scaled_to_odds(MAX_SCALED_ODDS)}", field="odds"
        )


def validate_bet_odds(
    odds: int,
    ceiling: int,
    rule: OddsRule = OddsRule.CHALLENGE_CEILING,
    min_odds: int = MIN_ODDS,
    fixed_cap: int = FIXED_ODDS_CAP,
) -> int:
    """Check the odds of a new bet against the configured rule.

    CHALLENGE_CEILING bounds odds to ``[min_odds, ceiling]``; FIXED_CAP bounds
    them to ``[min_odds, fixed_cap]`` whatever the challenge was created with.
    """
    rule = OddsRule(rule)
    match rule:
        case OddsRule.CHALLENGE_CEILING:
            upper = ceiling
            label = "the challenge maximum"
        case OddsRule.FIXED_CAP:
            upper = fixed_cap
            label = "the maximum"
        case _:
            assert_never(rule)

    if odds < min_odds:
        raise InvalidInputError(
            f"Odds must be at least {scaled_to_odds(min_odds)}", field="odds"
        )
    if odds > upper:
        raise InvalidInputError(
            f"Odds cannot exceed {label} of {scaled_to_odds(upper)}", field="odds"
        )
    return odds


def resolve_final_status(balance: int, target_amount: int) -> ChallengeStatus:
    """Completed when the balance reached the target, failed otherwise."""
    if balance >= target_amount:
        return ChallengeStatus.COMPLETED
    return ChallengeStatus.FAILED


def summarize_challenge(
    challenge: ChallengeLike, bets: Sequence[BetLike]
) -> ChallengeProgress:
    """Every derived figure the challenge detail view needs."""
    shown = display_balance(challenge, bets)
    results = [coerce_result(bet) for bet in bets]
    wins = results.count(BetResult.WIN)
    losses = results.count(BetResult.LOSS)
    settled = wins + losses

    return ChallengeProgress(
        current_balance=current_balance(challenge.initial_stake, bets),
        display_balance=shown,
        accumulated_profit=accumulated_profit(bets),
        next_stake=next_stake(challenge, bets),
        progress_percentage=progress_percentage(shown, challenge.target_amount),
        settled_bets=settled,
        wins=wins,
        losses=losses,
        next_day_number=len(bets) + 1,
        plan_complete=settled >= challenge.days_total,
    )
