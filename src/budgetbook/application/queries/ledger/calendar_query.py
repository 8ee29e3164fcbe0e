"""Calendar view of one month."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from budgetbook.domain.ledger.services import LedgerReportService
from budgetbook.domain.shared.month import Month

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory
    from budgetbook.domain.ledger.services import CalendarDay


class CalendarQuery:
    def __init__(self, factory: LedgerFactory):
        self._factory = factory

    @classmethod
    def from_factory(cls, factory: LedgerFactory) -> CalendarQuery:
        return cls(factory=factory)

    async def execute(self, month: Optional[Month] = None) -> list[CalendarDay]:
        """Every day of the month, each with its transactions and net total."""
        month = month or Month.current()
        async with self._factory.unit_of_work() as uow:
            transactions = await uow.transactions.find_by_date_range(
                month.first_day,
                month.last_day,
            )
        return LedgerReportService.calendar(transactions, month)
