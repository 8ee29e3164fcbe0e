"""Pydantic schemas for API request/response models."""

from budgetbook.presentation.api.schemas.accounts import (
    AccountCreateRequest,
    AccountListResponse,
    AccountResponse,
)
from budgetbook.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from budgetbook.presentation.api.schemas.budgets import (
    BudgetCreateRequest,
    BudgetResponse,
    BudgetStatusListResponse,
    BudgetStatusResponse,
)
from budgetbook.presentation.api.schemas.common import ErrorResponse, HealthResponse
from budgetbook.presentation.api.schemas.dashboard import (
    CalendarDayResponse,
    CalendarResponse,
    CategoryExpenseResponse,
    CategoryResponse,
    DailyTrendResponse,
    DashboardResponse,
)
from budgetbook.presentation.api.schemas.transactions import (
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
)

__all__ = [
    "AccountCreateRequest",
    "AccountListResponse",
    "AccountResponse",
    "AuthResponse",
    "BudgetCreateRequest",
    "BudgetResponse",
    "BudgetStatusListResponse",
    "BudgetStatusResponse",
    "CalendarDayResponse",
    "CalendarResponse",
    "CategoryExpenseResponse",
    "CategoryResponse",
    "DailyTrendResponse",
    "DashboardResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "RefreshRequest",
    "RegisterRequest",
    "TokenResponse",
    "TransactionCreateRequest",
    "TransactionListResponse",
    "TransactionResponse",
    "UserResponse",
]
