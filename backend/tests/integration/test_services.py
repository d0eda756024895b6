"""
Integration Tests: Services

Runs the service layer against an in-memory SQLite database.

Test cases:
- Challenge creation and ownership checks
- Bet placement: frozen stakes, sequential days, odds rules, full plans
- One-way settlement of bets and challenges
- Budgets, expenses and gambling limits
"""

from datetime import date

import pytest

from challenge_tracker.config import ChallengeConfig, HabitsConfig
from challenge_tracker.engine import (
    BetResult,
    ChallengeStatus,
    InvalidInputError,
    OddsRule,
    Strategy,
)
from challenge_tracker.models import BudgetPeriod, BudgetStatus
from challenge_tracker.services import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    analytics_service,
    bet_service,
    budget_service,
    challenge_service,
    habits_service,
)

USER = 1
OTHER_USER = 2


async def new_challenge(db, **overrides):
    fields = dict(
        user_id=USER,
        name="Road to 5k",
        initial_stake=1000,
        target_amount=500_000,
        odds=130,
        days_total=3,
        strategy=Strategy.COMPOUND,
    )
    fields.update(overrides)
    return await challenge_service.create_challenge(db, **fields)


def test_create_challenge_rejects_invalid_terms(run_db):
    async def scenario(db):
        with pytest.raises(InvalidInputError):
            await new_challenge(db, target_amount=500)
        return await challenge_service.list_challenges(db, USER)

    assert run_db(scenario) == []


def test_compound_stakes_follow_the_balance(run_db):
    config = ChallengeConfig()

    async def scenario(db):
        challenge = await new_challenge(db)

        day1 = await bet_service.add_bet(db, challenge.id, USER, "Arsenal", config)
        assert (day1.day_number, day1.stake_amount, day1.odds) == (1, 1000, 130)

        day1 = await bet_service.settle_bet(db, day1.id, USER, BetResult.WIN)
        assert day1.profit == 300

        day2 = await bet_service.add_bet(
            db, challenge.id, USER, "Chelsea", config, odds=120
        )
        assert (day2.day_number, day2.stake_amount) == (2, 1300)

        await bet_service.settle_bet(db, day2.id, USER, BetResult.LOSS)

        challenge = await challenge_service.get_owned_challenge(db, challenge.id, USER)
        return challenge_service.get_progress(challenge)

    progress = run_db(scenario)
    assert progress.current_balance == 0
    assert progress.next_stake == 0
    assert progress.wins == 1
    assert progress.losses == 1


def test_placed_stake_is_not_recomputed(run_db):
    config = ChallengeConfig()

    async def scenario(db):
        challenge = await new_challenge(db)
        day1 = await bet_service.add_bet(db, challenge.id, USER, "Arsenal", config)
        day2 = await bet_service.add_bet(db, challenge.id, USER, "Spurs", config)
        await bet_service.settle_bet(db, day1.id, USER, BetResult.WIN)
        return await bet_service.get_bet(db, day2.id)

    # Placed before day 1 settled, so it still carries the stake of that moment
    assert run_db(scenario).stake_amount == 1000


def test_take_profit_stake_stays_fixed(run_db):
    config = ChallengeConfig()

    async def scenario(db):
        challenge = await new_challenge(
            db, initial_stake=5000, target_amount=20000, odds=125,
            strategy=Strategy.TAKE_PROFIT,
        )
        day1 = await bet_service.add_bet(db, challenge.id, USER, "Celtic", config)
        await bet_service.settle_bet(db, day1.id, USER, BetResult.WIN)
        return await bet_service.add_bet(db, challenge.id, USER, "Rangers", config)

    assert run_db(scenario).stake_amount == 5000


def test_bet_odds_rules(run_db):
    async def scenario(db):
        challenge = await new_challenge(db, odds=150)

        with pytest.raises(InvalidInputError):
            await bet_service.add_bet(
                db, challenge.id, USER, "Arsenal", ChallengeConfig(), odds=151
            )

        fixed = ChallengeConfig(odds_rule=OddsRule.FIXED_CAP)
        with pytest.raises(InvalidInputError):
            await bet_service.add_bet(db, challenge.id, USER, "Arsenal", fixed, odds=140)
        return await bet_service.add_bet(db, challenge.id, USER, "Arsenal", fixed, odds=130)

    assert run_db(scenario).odds == 130


def test_full_plan_rejects_more_bets(run_db):
    config = ChallengeConfig()

    async def scenario(db):
        challenge = await new_challenge(db, days_total=1)
        await bet_service.add_bet(db, challenge.id, USER, "Arsenal", config)
        with pytest.raises(ConflictError):
            await bet_service.add_bet(db, challenge.id, USER, "Chelsea", config)

    run_db(scenario)


def test_blank_team_name_rejected(run_db):
    async def scenario(db):
        challenge = await new_challenge(db)
        with pytest.raises(InvalidInputError):
            await bet_service.add_bet(db, challenge.id, USER, "   ", ChallengeConfig())

    run_db(scenario)


def test_bet_settles_only_once(run_db):
    async def scenario(db):
        challenge = await new_challenge(db)
        bet = await bet_service.add_bet(db, challenge.id, USER, "Arsenal", ChallengeConfig())
        await bet_service.settle_bet(db, bet.id, USER, BetResult.LOSS)
        with pytest.raises(ConflictError):
            await bet_service.settle_bet(db, bet.id, USER, BetResult.WIN)
        return await bet_service.get_bet(db, bet.id)

    bet = run_db(scenario)
    assert bet.result == BetResult.LOSS
    assert bet.profit == -1000


def test_settling_as_pending_is_rejected(run_db):
    async def scenario(db):
        challenge = await new_challenge(db)
        bet = await bet_service.add_bet(db, challenge.id, USER, "Arsenal", ChallengeConfig())
        with pytest.raises(InvalidInputError):
            await bet_service.settle_bet(db, bet.id, USER, BetResult.PENDING)

    run_db(scenario)


def test_other_users_cannot_touch_a_challenge(run_db):
    async def scenario(db):
        challenge = await new_challenge(db)
        with pytest.raises(ForbiddenError):
            await challenge_service.get_owned_challenge(db, challenge.id, OTHER_USER)
        with pytest.raises(ForbiddenError):
            await bet_service.add_bet(
                db, challenge.id, OTHER_USER, "Arsenal", ChallengeConfig()
            )
        with pytest.raises(NotFoundError):
            await challenge_service.get_owned_challenge(db, challenge.id + 100, USER)

    run_db(scenario)


def test_finalize_marks_failed_below_target(run_db):
    async def scenario(db):
        challenge = await new_challenge(db)
        challenge = await challenge_service.finalize_challenge(db, challenge.id, USER)
        assert challenge.status == ChallengeStatus.FAILED

        # Terminal: no further transitions and no more bets
        with pytest.raises(ConflictError):
            await challenge_service.update_status(
                db, challenge.id, USER, ChallengeStatus.COMPLETED
            )
        with pytest.raises(ConflictError):
            await bet_service.add_bet(db, challenge.id, USER, "Arsenal", ChallengeConfig())

    run_db(scenario)


def test_finalize_marks_completed_at_target(run_db):
    async def scenario(db):
        challenge = await new_challenge(db, initial_stake=1000, target_amount=1300)
        bet = await bet_service.add_bet(db, challenge.id, USER, "Arsenal", ChallengeConfig())
        await bet_service.settle_bet(db, bet.id, USER, BetResult.WIN)
        challenge = await challenge_service.finalize_challenge(db, challenge.id, USER)
        return challenge.status

    assert run_db(scenario) == ChallengeStatus.COMPLETED


def test_bets_of_a_finalized_challenge_cannot_be_settled(run_db):
    async def scenario(db):
        challenge = await new_challenge(db, initial_stake=1000, target_amount=1300)
        bet = await bet_service.add_bet(db, challenge.id, USER, "Arsenal", ChallengeConfig())
        await challenge_service.finalize_challenge(db, challenge.id, USER)
        with pytest.raises(ConflictError):
            await bet_service.settle_bet(db, bet.id, USER, BetResult.WIN)
        return await bet_service.get_bet(db, bet.id)

    assert run_db(scenario).result == BetResult.PENDING


def test_amounts_beyond_32_bits_are_stored(run_db):
    async def scenario(db):
        challenge = await new_challenge(db, target_amount=3_000_000_000)
        bet = await bet_service.add_bet(db, challenge.id, USER, "Arsenal", ChallengeConfig())
        db.expunge_all()
        return await challenge_service.get_challenge(db, challenge.id), bet.id

    challenge, bet_id = run_db(scenario)
    assert challenge.target_amount == 3_000_000_000
    assert [b.id for b in challenge.bets] == [bet_id]


def test_delete_challenge_removes_bets(run_db):
    async def scenario(db):
        challenge = await new_challenge(db)
        bet = await bet_service.add_bet(db, challenge.id, USER, "Arsenal", ChallengeConfig())
        await challenge_service.delete_challenge(db, challenge.id, USER)
        db.expunge_all()
        return (
            await challenge_service.get_challenge(db, challenge.id),
            await bet_service.get_bet(db, bet.id),
        )

    assert run_db(scenario) == (None, None)


def test_portfolio_stats(run_db):
    async def scenario(db):
        first = await new_challenge(db)
        second = await new_challenge(db, initial_stake=3000, target_amount=9000, odds=120)
        bet = await bet_service.add_bet(db, first.id, USER, "Arsenal", ChallengeConfig())
        await bet_service.settle_bet(db, bet.id, USER, BetResult.WIN)
        bet = await bet_service.add_bet(db, second.id, USER, "Spurs", ChallengeConfig())
        await bet_service.settle_bet(db, bet.id, USER, BetResult.LOSS)
        db.expunge_all()
        return await analytics_service.get_portfolio_stats(db, USER)

    stats = run_db(scenario)
    assert stats.total_profit == 300
    assert stats.total_loss == 3000
    assert stats.net_profit == -2700
    assert stats.total_bets == 2
    assert stats.win_bets == 1
    assert stats.total_staked == 4000


# =============================================================================
# Budgets and habits
# =============================================================================


def test_expense_pushes_budget_over_limit(run_db):
    async def scenario(db):
        budget = await budget_service.create_budget(
            db, USER, "Groceries", 10000, BudgetPeriod.MONTHLY,
            date(2026, 10, 1), date(2026, 10, 31),
        )
        await budget_service.create_expense(
            db, USER, "food", 6000, date(2026, 10, 2), budget_id=budget.id
        )
        await budget_service.create_expense(
            db, USER, "food", 5000, date(2026, 10, 9), budget_id=budget.id
        )
        await budget_service.create_expense(db, USER, "travel", 1000, date(2026, 10, 9))
        budget = await budget_service.get_owned_budget(db, budget.id, USER)
        breakdown = await budget_service.get_spending_breakdown(db, USER)
        return budget, budget_service.get_usage(budget), breakdown

    budget, usage, breakdown = run_db(scenario)
    assert budget.spent == 11000
    assert budget.status == BudgetStatus.EXCEEDED
    assert usage.exceeded is True
    assert [(t.category, t.amount) for t in breakdown] == [("food", 11000), ("travel", 1000)]


def test_expense_against_foreign_budget_rejected(run_db):
    async def scenario(db):
        budget = await budget_service.create_budget(
            db, USER, "Fun", 5000, BudgetPeriod.WEEKLY, date(2026, 10, 1), date(2026, 10, 7)
        )
        with pytest.raises(ForbiddenError):
            await budget_service.create_expense(
                db, OTHER_USER, "fun", 100, date(2026, 10, 2), budget_id=budget.id
            )

    run_db(scenario)


def test_habits_created_with_defaults_and_updated(run_db):
    config = HabitsConfig()

    async def scenario(db):
        habits = await habits_service.get_or_create(db, USER, config)
        assert habits.daily_limit == 50000
        assert habits.alert_threshold == 80

        with pytest.raises(InvalidInputError, match="Maximum monthly limit is 10,000.00"):
            await habits_service.update_limits(db, USER, config, monthly_limit=1_000_001)

        habits = await habits_service.update_limits(
            db, USER, config, daily_limit=20000, alert_threshold=50
        )
        return habits, habits_service.get_usage(habits)

    habits, usage = run_db(scenario)
    assert habits.daily_limit == 20000
    assert habits.weekly_limit == 300000
    assert habits.alert_threshold == 50
    assert set(usage) == {"daily", "weekly", "monthly"}
    assert usage["daily"].spent == 0
