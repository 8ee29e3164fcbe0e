"""Dashboard, calendar and category catalogue endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from budgetbook.application.queries.ledger import (
    CalendarQuery,
    CategoriesQuery,
    DashboardQuery,
)
from budgetbook.domain.shared.month import Month
from budgetbook.presentation.api.dependencies import LedgerFactoryDep, SettingsDep
from budgetbook.presentation.api.routers.transactions import transaction_to_response
from budgetbook.presentation.api.schemas.dashboard import (
    CalendarDayResponse,
    CalendarResponse,
    CategoryExpenseResponse,
    CategoryResponse,
    DailyTrendResponse,
    DashboardResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

MonthFilter = Annotated[
    str | None,
    Query(pattern=r"^\d{4}-\d{2}$", description="Month in YYYY-MM format"),
]


def _selected_month(month: str | None) -> Month:
    return Month.parse(month) if month else Month.current()


@router.get(
    "/dashboard",
    summary="Monthly dashboard",
    responses={
        200: {"description": "Net worth, income, expenses and daily trend"},
    },
)
async def get_dashboard(
    factory: LedgerFactoryDep,
    settings: SettingsDep,
    month: MonthFilter = None,
) -> DashboardResponse:
    """
    Summarize a month (default: current).

    Net worth is the sum of all balances and does not depend on the month.
    The daily trend covers every day of the month, including empty ones.
    """
    summary = await DashboardQuery.from_factory(factory).execute(_selected_month(month))

    return DashboardResponse(
        month=str(summary.month),
        period_label=summary.month.label,
        currency=settings.currency,
        net_worth=summary.net_worth,
        income=summary.income,
        expense=summary.expense,
        expense_ratio=summary.expense_ratio,
        expense_by_category=[
            CategoryExpenseResponse(
                category=category.value,
                amount=amount,
                color=category.color,
            )
            for category, amount in summary.expense_by_category.items()
        ],
        daily=[
            DailyTrendResponse(day=d.day, income=d.income, expense=d.expense)
            for d in summary.daily
        ],
    )


@router.get(
    "/calendar",
    summary="Monthly calendar",
    responses={
        200: {"description": "Every day of the month with its transactions"},
    },
)
async def get_calendar(
    factory: LedgerFactoryDep,
    month: MonthFilter = None,
) -> CalendarResponse:
    selected = _selected_month(month)
    days = await CalendarQuery.from_factory(factory).execute(selected)

    return CalendarResponse(
        month=str(selected),
        days=[
            CalendarDayResponse(
                day=d.day,
                net=d.net,
                transactions=[transaction_to_response(t) for t in d.transactions],
            )
            for d in days
        ],
    )


@router.get(
    "/categories",
    summary="Category catalogue",
    responses={
        200: {"description": "Categories with display color and icon"},
    },
)
async def list_categories() -> list[CategoryResponse]:
    return [
        CategoryResponse(
            name=info.name,
            color=info.color,
            icon=info.icon,
            types=[kind.value for kind in info.kinds],
        )
        for info in CategoriesQuery().execute()
    ]
