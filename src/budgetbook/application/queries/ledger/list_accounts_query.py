"""List the accounts of the current user."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from budgetbook.domain.ledger.services import LedgerReportService

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory
    from budgetbook.domain.ledger.entities import Account


@dataclass
class AccountListResult:
    """Result of listing accounts."""

    accounts: list[Account]
    net_worth: Decimal

    @property
    def total_count(self) -> int:
        return len(self.accounts)


class ListAccountsQuery:
    """Accounts ordered by creation time, with their summed balance."""

    def __init__(self, factory: LedgerFactory):
        self._factory = factory

    @classmethod
    def from_factory(cls, factory: LedgerFactory) -> ListAccountsQuery:
        return cls(factory=factory)

    async def execute(self) -> AccountListResult:
        async with self._factory.unit_of_work() as uow:
            accounts = await uow.accounts.find_all()
        return AccountListResult(
            accounts=accounts,
            net_worth=LedgerReportService.net_worth(accounts),
        )
