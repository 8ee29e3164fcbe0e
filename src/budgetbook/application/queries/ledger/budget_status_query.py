"""Budget usage for one month."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from budgetbook.domain.ledger.services import BudgetSpendingService
from budgetbook.domain.shared.month import Month

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory
    from budgetbook.domain.ledger.services import BudgetUsage


class BudgetStatusQuery:
    """
    Evaluate every budget against one month's expenses.

    ``spent`` is recomputed from the stored transactions on each call and
    never persisted. The month defaults to the current one.
    """

    def __init__(self, factory: LedgerFactory):
        self._factory = factory

    @classmethod
    def from_factory(cls, factory: LedgerFactory) -> BudgetStatusQuery:
        return cls(factory=factory)

    async def execute(self, month: Optional[Month] = None) -> list[BudgetUsage]:
        month = month or Month.current()
        async with self._factory.unit_of_work() as uow:
            budgets = await uow.budgets.find_all()
            transactions = await uow.transactions.find_by_date_range(
                month.first_day,
                month.last_day,
            )
        return BudgetSpendingService.evaluate(budgets, transactions, month)
