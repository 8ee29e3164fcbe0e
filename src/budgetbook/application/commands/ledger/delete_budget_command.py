"""Delete a budget."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from budgetbook.application.commands.ledger.notifications import publish_changes
from budgetbook.application.ports import ChangeAction, ChangeCollection
from budgetbook.domain.ledger.exceptions import BudgetNotFoundError

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory

logger = logging.getLogger(__name__)


class DeleteBudgetCommand:
    """Delete a budget of the current user."""

    def __init__(self, factory: LedgerFactory):
        self._factory = factory

    @classmethod
    def from_factory(cls, factory: LedgerFactory) -> DeleteBudgetCommand:
        return cls(factory=factory)

    async def execute(self, budget_id: UUID) -> None:
        async with self._factory.unit_of_work() as uow:
            deleted = await uow.budgets.delete(budget_id)
            if not deleted:
                raise BudgetNotFoundError(budget_id)
            await uow.commit()

        logger.info("Deleted budget %s for %s", budget_id, self._factory.user_context)

        publish_changes(
            self._factory.change_feed,
            self._factory.user_context.user_id,
            ChangeCollection.BUDGETS,
            ChangeAction.DELETED,
            [budget_id],
        )
