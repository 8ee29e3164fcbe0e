"""List the budgets of the current user."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory
    from budgetbook.domain.ledger.entities import Budget


class ListBudgetsQuery:
    def __init__(self, factory: LedgerFactory):
        self._factory = factory

    @classmethod
    def from_factory(cls, factory: LedgerFactory) -> ListBudgetsQuery:
        return cls(factory=factory)

    async def execute(self) -> list[Budget]:
        async with self._factory.unit_of_work() as uow:
            return await uow.budgets.find_all()
