"""Dashboard, calendar and category schemas."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from budgetbook.presentation.api.schemas.transactions import TransactionResponse


class CategoryExpenseResponse(BaseModel):
    category: str
    amount: Decimal
    color: str


class DailyTrendResponse(BaseModel):
    day: date
    income: Decimal
    expense: Decimal


class DashboardResponse(BaseModel):
    """Monthly overview of the ledger."""

    month: str = Field(..., description="Month in YYYY-MM format")
    period_label: str = Field(..., description="Human-readable month, e.g. 'March 2024'")
    currency: str
    net_worth: Decimal = Field(..., description="Sum of all account balances")
    income: Decimal = Field(..., description="Income in the month")
    expense: Decimal = Field(..., description="Expenses in the month")
    expense_ratio: Decimal = Field(
        ...,
        description="Expense as whole percent of income, capped at 100",
    )
    expense_by_category: list[CategoryExpenseResponse]
    daily: list[DailyTrendResponse]


class CalendarDayResponse(BaseModel):
    day: date
    net: Decimal = Field(..., description="Income minus expense; transfers excluded")
    transactions: list[TransactionResponse]


class CalendarResponse(BaseModel):
    month: str
    days: list[CalendarDayResponse]


class CategoryResponse(BaseModel):
    name: str
    color: str
    icon: str
    types: list[str] = Field(..., description="Transaction types the category applies to")
