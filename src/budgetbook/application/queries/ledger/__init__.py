"""Ledger queries."""

from budgetbook.application.queries.ledger.budget_status_query import (
    BudgetStatusQuery,
)
from budgetbook.application.queries.ledger.calendar_query import CalendarQuery
from budgetbook.application.queries.ledger.categories_query import (
    CategoriesQuery,
    CategoryInfo,
)
from budgetbook.application.queries.ledger.dashboard_query import DashboardQuery
from budgetbook.application.queries.ledger.list_accounts_query import (
    AccountListResult,
    ListAccountsQuery,
)
from budgetbook.application.queries.ledger.list_budgets_query import ListBudgetsQuery
from budgetbook.application.queries.ledger.list_transactions_query import (
    ListTransactionsQuery,
    TransactionListResult,
)

__all__ = [
    "AccountListResult",
    "BudgetStatusQuery",
    "CalendarQuery",
    "CategoriesQuery",
    "CategoryInfo",
    "DashboardQuery",
    "ListAccountsQuery",
    "ListBudgetsQuery",
    "ListTransactionsQuery",
    "TransactionListResult",
]
