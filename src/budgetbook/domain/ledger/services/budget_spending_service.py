"""Budget spending calculation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, List

from budgetbook.domain.ledger.value_objects import Category

if TYPE_CHECKING:
    from budgetbook.domain.ledger.aggregates import Transaction
    from budgetbook.domain.ledger.entities import Budget
    from budgetbook.domain.shared.month import Month

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class BudgetUsage:
    """How much of a budget's limit one month's expenses consumed."""

    budget: Budget
    month: Month
    spent: Decimal

    @property
    def limit(self) -> Decimal:
        return self.budget.limit

    @property
    def remaining(self) -> Decimal:
        return self.budget.limit - self.spent

    @property
    def percentage(self) -> Decimal:
        """Share of the limit used, capped at 100."""
        used = self.spent / self.budget.limit * HUNDRED
        return min(used, HUNDRED).quantize(Decimal("0.01"))

    @property
    def is_over_budget(self) -> bool:
        return self.spent > self.budget.limit


class BudgetSpendingService:
    """Derives budget spending from transactions; never stored."""

    @staticmethod
    def spent(
        category: Category,
        transactions: Iterable[Transaction],
        month: Month,
    ) -> Decimal:
        """Sum of ``month``'s expenses in ``category``.

        The month matches on year and month, so last year's transactions in
        the same calendar month are not counted.
        """
        return sum(
            (
                t.amount
                for t in transactions
                if t.is_expense and t.category == category and month.contains(t.date)
            ),
            Decimal("0"),
        )

    @staticmethod
    def evaluate(
        budgets: Iterable[Budget],
        transactions: Iterable[Transaction],
        month: Month,
    ) -> List[BudgetUsage]:
        txns = list(transactions)
        return [
            BudgetUsage(
                budget=budget,
                month=month,
                spent=BudgetSpendingService.spent(budget.category, txns, month),
            )
            for budget in budgets
        ]
