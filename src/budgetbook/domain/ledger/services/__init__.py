"""Domain services for the ledger."""

from budgetbook.domain.ledger.services.budget_spending_service import (
    BudgetSpendingService,
    BudgetUsage,
)
from budgetbook.domain.ledger.services.ledger_posting_service import (
    LedgerPostingService,
)
from budgetbook.domain.ledger.services.ledger_report_service import (
    CalendarDay,
    DailyTotals,
    LedgerReportService,
    MonthlySummary,
)

__all__ = [
    "BudgetSpendingService",
    "BudgetUsage",
    "CalendarDay",
    "DailyTotals",
    "LedgerPostingService",
    "LedgerReportService",
    "MonthlySummary",
]
