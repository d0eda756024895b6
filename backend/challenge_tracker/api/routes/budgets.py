"""Budget and expense API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.database import get_current_user_id, get_db
from challenge_tracker.engine import to_cents
from challenge_tracker.schemas import (
    BudgetCreate,
    BudgetResponse,
    ExpenseCreate,
    ExpenseResponse,
)
from challenge_tracker.services import budget_service

router = APIRouter(tags=["Budgets"])


@router.post("/budgets", response_model=BudgetResponse, status_code=status.HTTP_201_CREATED)
async def create_budget(
    body: BudgetCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    budget = await budget_service.create_budget(
        db,
        user_id=user_id,
        name=body.name,
        amount=to_cents(body.amount, field="amount"),
        period=body.period,
        start_date=body.start_date,
        end_date=body.end_date,
    )
    return BudgetResponse.from_model(budget, budget_service.get_usage(budget))


@router.get("/budgets", response_model=list[BudgetResponse])
async def list_budgets(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    budgets = await budget_service.list_budgets(db, user_id)
    return [BudgetResponse.from_model(b, budget_service.get_usage(b)) for b in budgets]


@router.get("/budgets/{budget_id}", response_model=BudgetResponse)
async def get_budget(
    budget_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    budget = await budget_service.get_owned_budget(db, budget_id, user_id)
    return BudgetResponse.from_model(budget, budget_service.get_usage(budget))


@router.post("/expenses", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    body: ExpenseCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Record an expense, counting it against a budget when one is given."""
    expense = await budget_service.create_expense(
        db,
        user_id=user_id,
        category=body.category,
        amount=to_cents(body.amount, field="amount"),
        expense_date=body.date,
        budget_id=body.budget_id,
        description=body.description,
    )
    return ExpenseResponse.from_model(expense)


@router.get("/expenses", response_model=list[ExpenseResponse])
async def list_expenses(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    expenses = await budget_service.list_expenses(db, user_id)
    return [ExpenseResponse.from_model(e) for e in expenses]
