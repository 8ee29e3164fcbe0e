"""Post a transaction: the single entry point that mutates balances."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from budgetbook.application.commands.ledger.notifications import publish_changes
from budgetbook.application.commands.ledger.posting_policy import (
    PostingDeadline,
    PostingPolicy,
)
from budgetbook.application.ports import ChangeAction, ChangeCollection
from budgetbook.domain.ledger.aggregates import Transaction
from budgetbook.domain.ledger.exceptions import AccountNotFoundError
from budgetbook.domain.ledger.services import LedgerPostingService

if TYPE_CHECKING:
    from uuid import UUID

    from budgetbook.application.context import UserContext
    from budgetbook.application.factories import LedgerFactory
    from budgetbook.application.ports import ChangeFeed
    from budgetbook.domain.ledger.entities import Account
    from budgetbook.domain.ledger.value_objects import TransactionIntent

logger = logging.getLogger(__name__)


class PostTransactionCommand:
    """
    Apply a transaction intent to the ledger atomically.

    One attempt reads the source (and for transfers the destination)
    account, applies the deltas from ``LedgerPostingService``, writes the
    balances and appends the immutable record, then commits. Either all of
    it becomes visible or nothing does. Write conflicts restart the attempt
    in a fresh unit of work.
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
    ) -> PostTransactionCommand:
        return cls(factory=factory, policy=policy)

    @property
    def _user(self) -> UserContext:
        return self._factory.user_context

    async def execute(self, intent: TransactionIntent) -> Transaction:
        """
        Post ``intent`` for the current user.

        Raises
        ------
        ValidationError
            If the amount exceeds the configured maximum
        AccountNotFoundError
            If the source or destination account does not exist
        WriteConflictError
            If concurrent writers kept winning until attempts ran out
        PostingTimeoutError
            If the deadline passed before the commit started; nothing was written
        ConnectivityError
            If the store is unreachable
        """
        self._policy.check_amount(intent.amount)
        self._policy.check_amount(intent.total_debit, "total")

        transaction = await self._policy.run(
            lambda deadline: self._post_once(intent, deadline),
        )

        logger.info(
            "Posted %s %s on %s for %s (id=%s)",
            intent.kind.value,
            intent.amount,
            intent.date.isoformat(),
            self._user,
            transaction.id,
        )
        self._announce(transaction)
        return transaction

    async def _post_once(
        self,
        intent: TransactionIntent,
        deadline: PostingDeadline,
    ) -> Transaction:
        async with self._factory.unit_of_work() as uow:
            source = await uow.accounts.find_by_id(intent.account_id)
            if source is None:
                raise AccountNotFoundError(intent.account_id, role="source")

            affected: dict[UUID, Account] = {source.id: source}
            if intent.to_account_id is not None:
                destination = await uow.accounts.find_by_id(intent.to_account_id)
                if destination is None:
                    raise AccountNotFoundError(intent.to_account_id, role="destination")
                affected[destination.id] = destination

            for account_id, delta in LedgerPostingService.balance_deltas(intent).items():
                account = affected[account_id]
                account.apply_delta(delta)
                await uow.accounts.save(account)

            transaction = Transaction.create_from_intent(intent, self._user.user_id)
            await uow.transactions.add(transaction)

            deadline.check()
            await uow.commit()
        return transaction

    def _announce(self, transaction: Transaction) -> None:
        feed: Optional[ChangeFeed] = self._factory.change_feed
        user_id = self._user.user_id
        publish_changes(
            feed,
            user_id,
            ChangeCollection.TRANSACTIONS,
            ChangeAction.CREATED,
            [transaction.id],
        )
        publish_changes(
            feed,
            user_id,
            ChangeCollection.ACCOUNTS,
            ChangeAction.UPDATED,
            filter(None, (transaction.account_id, transaction.to_account_id)),
        )
