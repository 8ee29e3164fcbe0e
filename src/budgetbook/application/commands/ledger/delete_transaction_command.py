"""Delete a transaction record, optionally reversing its balance effect."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from budgetbook.application.commands.ledger.notifications import publish_changes
from budgetbook.application.commands.ledger.posting_policy import (
    PostingDeadline,
    PostingPolicy,
)
from budgetbook.application.ports import ChangeAction, ChangeCollection
from budgetbook.domain.ledger.exceptions import TransactionNotFoundError
from budgetbook.domain.ledger.services import LedgerPostingService

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory

logger = logging.getLogger(__name__)


class DeleteTransactionCommand:
    """
    Remove a transaction.

    By default only the record goes away and balances keep the effect of the
    transaction. With ``reverse_balance=True`` the inverse deltas are applied
    to every affected account that still exists, in the same unit of work as
    the deletion.
    """

    def __init__(
        self,
        factory: LedgerFactory,
        policy: Optional[PostingPolicy] = None,
    ):
        self._factory = factory
        self._policy = policy or PostingPolicy()

    @classmethod
    def from_factory(
        cls,
        factory: LedgerFactory,
        policy: Optional[PostingPolicy] = None,
    ) -> DeleteTransactionCommand:
        return cls(factory=factory, policy=policy)

    async def execute(
        self,
        transaction_id: UUID,
        reverse_balance: bool = False,
    ) -> None:
        reversed_accounts = await self._policy.run(
            lambda deadline: self._delete_once(transaction_id, reverse_balance, deadline),
        )

        logger.info(
            "Deleted transaction %s for %s (reversed accounts: %d)",
            transaction_id,
            self._factory.user_context,
            len(reversed_accounts),
        )
        self._announce(transaction_id, reversed_accounts)

    async def _delete_once(
        self,
        transaction_id: UUID,
        reverse_balance: bool,
        deadline: PostingDeadline,
    ) -> list[UUID]:
        reversed_accounts: list[UUID] = []

        async with self._factory.unit_of_work() as uow:
            transaction = await uow.transactions.find_by_id(transaction_id)
            if transaction is None:
                raise TransactionNotFoundError(transaction_id)

            if reverse_balance:
                deltas = LedgerPostingService.reversal_deltas(transaction)
                for account_id, delta in deltas.items():
                    account = await uow.accounts.find_by_id(account_id)
                    if account is None:
                        logger.warning(
                            "Account %s of transaction %s no longer exists, "
                            "skipping balance reversal",
                            account_id,
                            transaction_id,
                        )
                        continue
                    account.apply_delta(delta)
                    await uow.accounts.save(account)
                    reversed_accounts.append(account_id)

            await uow.transactions.delete(transaction_id)
            deadline.check()
            await uow.commit()

        return reversed_accounts

    def _announce(self, transaction_id: UUID, reversed_accounts: list[UUID]) -> None:
        feed = self._factory.change_feed
        user_id = self._factory.user_context.user_id
        publish_changes(
            feed,
            user_id,
            ChangeCollection.TRANSACTIONS,
            ChangeAction.DELETED,
            [transaction_id],
        )
        publish_changes(
            feed,
            user_id,
            ChangeCollection.ACCOUNTS,
            ChangeAction.UPDATED,
            reversed_accounts,
        )
