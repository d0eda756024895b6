"""Fixed-point conversions between display values and stored integers.

Money is kept in cents and odds are kept scaled by 100 (1.30 -> 130).
Conversions only happen at the boundary; the engine itself works on ints.

Both conversions reject values outside the range the database columns hold,
so anything that passes through them fits a signed 64-bit integer even after
a win at the largest odds.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from challenge_tracker.engine.exceptions import InvalidInputError

Number = Union[Decimal, int, float, str]

CENTS_PER_UNIT = 100
ODDS_SCALE = 100

# 10 trillion currency units
MAX_CENTS = 10**15
# 1000.00
MAX_SCALED_ODDS = 100_000

_CENT = Decimal("0.01")
_WHOLE = Decimal("1")


def _as_decimal(value: Number, field: Optional[str]) -> Decimal:
    try:
        # str() first so 1.3 becomes Decimal("1.3"), not its binary expansion
        decimal_value = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidInputError(f"Not a number: {value!r}", field=field)
    if not decimal_value.is_finite():
        raise InvalidInputError(f"Not a finite number: {value}", field=field)
    return decimal_value


def to_cents(amount: Number, field: Optional[str] = None) -> int:
    """Convert a currency amount (e.g. 10.50) to integer cents."""
    scaled = _as_decimal(amount, field) * CENTS_PER_UNIT
    if abs(scaled) > MAX_CENTS:
        raise InvalidInputError(
            f"Amount cannot exceed {from_cents(MAX_CENTS):,}", field=field
        )
    return int(scaled.quantize(_WHOLE, rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-place currency amount."""
    return (Decimal(cents) / CENTS_PER_UNIT).quantize(_CENT)


def odds_to_scaled(odds: Number, field: Optional[str] = "odds") -> int:
    """Convert decimal odds (e.g. 1.30) to the scaled integer form (130).

    Odds carry at most two decimal places; finer values are rejected rather
    than rounded, so 1.004 never silently becomes 1.00.
    """
    decimal_odds = _as_decimal(odds, field)
    scaled = decimal_odds * ODDS_SCALE
    if abs(scaled) > MAX_SCALED_ODDS:
        raise InvalidInputError(
            f"Odds cannot exceed {scaled_to_odds(MAX_SCALED_ODDS)}, got {odds}",
            field=field,
        )
    if scaled != scaled.to_integral_value():
        raise InvalidInputError(
            f"Odds can have at most two decimal places, got {odds}", field=field
        )
    return int(scaled)


def scaled_to_odds(scaled: int) -> Decimal:
    """Convert scaled odds (130) back to a two-place multiplier (1.30)."""
    return (Decimal(scaled) / ODDS_SCALE).quantize(_CENT)
