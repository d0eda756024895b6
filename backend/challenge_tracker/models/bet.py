"""Bet database model."""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from challenge_tracker.database.base import Base
from challenge_tracker.engine import BetResult
from challenge_tracker.models.base import IntegerIDMixin, TimestampMixin, enum_column_type


class Bet(Base, IntegerIDMixin, TimestampMixin):
    """One daily wager within a challenge."""

    __tablename__ = "bets"

    # Foreign keys
    challenge_id = Column(
        Integer,
        ForeignKey("challenges.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Bet details
    day_number = Column(Integer, nullable=False)
    team_name = Column(String(255), nullable=False)
    match_details = Column(Text, nullable=True)
    stake_amount = Column(BigInteger, nullable=False, comment="Frozen at creation, cents")
    odds = Column(Integer, nullable=False, comment="Scaled by 100")

    # Settlement
    result = Column(
        enum_column_type(BetResult, "bet_result"),
        nullable=False,
        default=BetResult.PENDING,
    )
    profit = Column(BigInteger, nullable=False, default=0, comment="Cents, negative on loss")

    # Relationships
    challenge = relationship("Challenge", back_populates="bets")

    # Constraints
    __table_args__ = (
        UniqueConstraint("challenge_id", "day_number", name="unique_bet_day"),
        CheckConstraint("day_number > 0", name="positive_day_number"),
        CheckConstraint("stake_amount > 0", name="positive_stake_amount"),
        CheckConstraint("odds > 100", name="bet_odds_above_even"),
    )

    def __repr__(self) -> str:
        return f"<Bet day {self.day_number} {self.team_name} {self.stake_amount}c @ {self.odds} ({self.result})>"
