from budgetbook.presentation.api.routers.accounts import router as accounts_router
from budgetbook.presentation.api.routers.auth import router as auth_router
from budgetbook.presentation.api.routers.budgets import router as budgets_router
from budgetbook.presentation.api.routers.changes import router as changes_router
from budgetbook.presentation.api.routers.dashboard import router as dashboard_router
from budgetbook.presentation.api.routers.transactions import (
    router as transactions_router,
)

__all__ = [
    "accounts_router",
    "auth_router",
    "budgets_router",
    "changes_router",
    "dashboard_router",
    "transactions_router",
]
