"""Dashboard figures for one month."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from budgetbook.domain.ledger.services import LedgerReportService
from budgetbook.domain.shared.month import Month

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory
    from budgetbook.domain.ledger.services import MonthlySummary


class DashboardQuery:
    """Net worth over all accounts plus the month's income and spending."""

    def __init__(self, factory: LedgerFactory):
        self._factory = factory

    @classmethod
    def from_factory(cls, factory: LedgerFactory) -> DashboardQuery:
        return cls(factory=factory)

    async def execute(self, month: Optional[Month] = None) -> MonthlySummary:
        month = month or Month.current()
        async with self._factory.unit_of_work() as uow:
            accounts = await uow.accounts.find_all()
            transactions = await uow.transactions.find_by_date_range(
                month.first_day,
                month.last_day,
            )
        return LedgerReportService.summarize(accounts, transactions, month)
