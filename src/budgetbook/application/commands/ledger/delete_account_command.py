"""Delete an account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from budgetbook.application.commands.ledger.notifications import publish_changes
from budgetbook.application.ports import ChangeAction, ChangeCollection
from budgetbook.domain.ledger.exceptions import AccountNotFoundError

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory

logger = logging.getLogger(__name__)


class DeleteAccountCommand:
    """
    Delete an account of the current user.

    Historical transactions that reference the account are left untouched;
    read models tolerate the dangling reference.
    """

    def __init__(self, factory: LedgerFactory):
        self._factory = factory

    @classmethod
    def from_factory(cls, factory: LedgerFactory) -> DeleteAccountCommand:
        return cls(factory=factory)

    async def execute(self, account_id: UUID) -> None:
        async with self._factory.unit_of_work() as uow:
            deleted = await uow.accounts.delete(account_id)
            if not deleted:
                raise AccountNotFoundError(account_id)
            await uow.commit()

        logger.info("Deleted account %s for %s", account_id, self._factory.user_context)

        publish_changes(
            self._factory.change_feed,
            self._factory.user_context.user_id,
            ChangeCollection.ACCOUNTS,
            ChangeAction.DELETED,
            [account_id],
        )
