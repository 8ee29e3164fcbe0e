"""Budgets router: monthly category limits and their usage."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from budgetbook.application.commands.ledger import (
    DeleteBudgetCommand,
    SaveBudgetCommand,
)
from budgetbook.application.queries.ledger import BudgetStatusQuery, ListBudgetsQuery
from budgetbook.domain.ledger.entities import Budget
from budgetbook.domain.shared.month import Month
from budgetbook.presentation.api.dependencies import LedgerFactoryDep
from budgetbook.presentation.api.schemas.budgets import (
    BudgetCreateRequest,
    BudgetResponse,
    BudgetStatusListResponse,
    BudgetStatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

MonthFilter = Annotated[
    str | None,
    Query(pattern=r"^\d{4}-\d{2}$", description="Month in YYYY-MM format"),
]


def _budget_to_response(budget: Budget) -> BudgetResponse:
    return BudgetResponse(
        id=budget.id,
        category=budget.category.value,
        limit=budget.limit,
        created_at=budget.created_at,
    )


@router.get(
    "",
    summary="List budgets",
    responses={
        200: {"description": "Budgets, newest first"},
    },
)
async def list_budgets(factory: LedgerFactoryDep) -> list[BudgetResponse]:
    budgets = await ListBudgetsQuery.from_factory(factory).execute()
    return [_budget_to_response(b) for b in budgets]


@router.get(
    "/status",
    summary="Budget usage for a month",
    responses={
        200: {"description": "Spent, remaining and percentage per budget"},
    },
)
async def get_budget_status(
    factory: LedgerFactoryDep,
    month: MonthFilter = None,
) -> BudgetStatusListResponse:
    """
    Evaluate every budget against the month's expenses.

    Defaults to the current month. Budgets sharing a category are reported
    independently.
    """
    selected = Month.parse(month) if month else Month.current()
    usages = await BudgetStatusQuery.from_factory(factory).execute(selected)

    return BudgetStatusListResponse(
        month=str(selected),
        budgets=[
            BudgetStatusResponse(
                id=usage.budget.id,
                category=usage.budget.category.value,
                color=usage.budget.category.color,
                limit=usage.limit,
                spent=usage.spent,
                remaining=usage.remaining,
                percentage=usage.percentage,
                is_over_budget=usage.is_over_budget,
            )
            for usage in usages
        ],
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create budget",
    responses={
        201: {"description": "Budget created"},
        400: {"description": "Unknown category or non-positive limit"},
    },
)
async def create_budget(
    request: BudgetCreateRequest,
    factory: LedgerFactoryDep,
) -> BudgetResponse:
    budget = await SaveBudgetCommand.from_factory(factory).execute(
        category=request.category,
        limit=request.limit,
    )
    return _budget_to_response(budget)


@router.delete(
    "/{budget_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete budget",
    responses={
        204: {"description": "Budget deleted"},
        404: {"description": "Budget not found"},
    },
)
async def delete_budget(budget_id: UUID, factory: LedgerFactoryDep) -> None:
    await DeleteBudgetCommand.from_factory(factory).execute(budget_id)
