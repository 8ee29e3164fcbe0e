"""List transactions with the names of the accounts they reference."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional
from uuid import UUID

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory
    from budgetbook.domain.ledger.aggregates import Transaction
    from budgetbook.domain.shared.month import Month


@dataclass
class TransactionListResult:
    transactions: list[Transaction]
    account_names: dict[UUID, str] = field(default_factory=dict)

    def account_name(self, account_id: Optional[UUID]) -> Optional[str]:
        """Name of a referenced account, None if it was deleted."""
        if account_id is None:
            return None
        return self.account_names.get(account_id)


class ListTransactionsQuery:
    """Transactions newest first, optionally limited to one month."""

    def __init__(self, factory: LedgerFactory):
        self._factory = factory

    @classmethod
    def from_factory(cls, factory: LedgerFactory) -> ListTransactionsQuery:
        return cls(factory=factory)

    async def execute(
        self,
        month: Optional[Month] = None,
        limit: Optional[int] = None,
    ) -> TransactionListResult:
        async with self._factory.unit_of_work() as uow:
            if month is None:
                transactions = await uow.transactions.find_all()
            else:
                transactions = await uow.transactions.find_by_date_range(
                    month.first_day,
                    month.last_day,
                )
            accounts = await uow.accounts.find_all()

        if limit is not None:
            transactions = transactions[:limit]

        return TransactionListResult(
            transactions=transactions,
            account_names={a.id: a.name for a in accounts},
        )
