"""Challenge database model."""

from sqlalchemy import BigInteger, CheckConstraint, Column, Index, Integer, String
from sqlalchemy.orm import relationship

from challenge_tracker.database.base import Base
from challenge_tracker.engine import ChallengeStatus, Strategy
from challenge_tracker.models.base import IntegerIDMixin, TimestampMixin, enum_column_type


class Challenge(Base, IntegerIDMixin, TimestampMixin):
    """A staged betting plan with a stake, a target and an odds ceiling."""

    __tablename__ = "challenges"

    user_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)

    # Money in cents, odds scaled by 100 (1.30 -> 130)
    initial_stake = Column(BigInteger, nullable=False)
    target_amount = Column(BigInteger, nullable=False)
    odds = Column(Integer, nullable=False, comment="Odds ceiling for every bet")
    days_total = Column(Integer, nullable=False)

    strategy = Column(
        enum_column_type(Strategy, "challenge_strategy"),
        nullable=False,
        default=Strategy.COMPOUND,
    )
    status = Column(
        enum_column_type(ChallengeStatus, "challenge_status"),
        nullable=False,
        default=ChallengeStatus.ACTIVE,
    )

    # Relationships
    bets = relationship(
        "Bet",
        back_populates="challenge",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="Bet.day_number",
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("initial_stake > 0", name="positive_initial_stake"),
        CheckConstraint("target_amount > initial_stake", name="target_above_stake"),
        CheckConstraint("odds > 100", name="odds_above_even"),
        CheckConstraint("days_total > 0", name="positive_days_total"),
        Index("idx_challenges_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Challenge {self.name} ({self.strategy}, {self.status})>"
