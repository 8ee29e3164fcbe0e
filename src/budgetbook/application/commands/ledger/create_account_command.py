"""Create a new account with an opening balance."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional

from budgetbook.application.commands.ledger.notifications import publish_changes
from budgetbook.application.ports import ChangeAction, ChangeCollection
from budgetbook.domain.ledger.entities import DEFAULT_ACCOUNT_TYPE, Account
from budgetbook.domain.ledger.value_objects import to_amount
from budgetbook.domain.shared.exceptions import ErrorCode, ValidationError

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory

logger = logging.getLogger(__name__)


class CreateAccountCommand:
    """Validate and create a new account for the current user."""

    def __init__(self, factory: LedgerFactory, max_amount: Optional[Decimal] = None):
        self._factory = factory
        self._max_amount = max_amount

    @classmethod
    def from_factory(
        cls,
        factory: LedgerFactory,
        max_amount: Optional[Decimal] = None,
    ) -> CreateAccountCommand:
        return cls(factory=factory, max_amount=max_amount)

    async def execute(
        self,
        name: str,
        account_type: str = DEFAULT_ACCOUNT_TYPE,
        balance: Any = Decimal("0"),
    ) -> Account:
        opening = to_amount(balance, "balance")
        if self._max_amount is not None and abs(opening) > self._max_amount:
            msg = f"Balance exceeds the maximum of {self._max_amount}"
            raise ValidationError(msg, code=ErrorCode.INVALID_AMOUNT)

        user = self._factory.user_context
        account = Account(
            name=name,
            account_type=account_type,
            balance=opening,
            user_id=user.user_id,
        )

        async with self._factory.unit_of_work() as uow:
            await uow.accounts.save(account)
            await uow.commit()

        logger.info("Created account %r (%s) for %s", account.name, account.id, user)

        publish_changes(
            self._factory.change_feed,
            user.user_id,
            ChangeCollection.ACCOUNTS,
            ChangeAction.CREATED,
            [account.id],
        )
        return account
