"""Create a monthly budget for a category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from budgetbook.application.commands.ledger.notifications import publish_changes
from budgetbook.application.ports import ChangeAction, ChangeCollection
from budgetbook.domain.ledger.entities import Budget
from budgetbook.domain.ledger.value_objects import Category

if TYPE_CHECKING:
    from budgetbook.application.factories import LedgerFactory

logger = logging.getLogger(__name__)


class SaveBudgetCommand:
    """Create a budget; existing budgets for the same category are kept."""

    def __init__(self, factory: LedgerFactory):
        self._factory = factory

    @classmethod
    def from_factory(cls, factory: LedgerFactory) -> SaveBudgetCommand:
        return cls(factory=factory)

    async def execute(self, category: str | Category, limit: Any) -> Budget:
        user = self._factory.user_context
        budget = Budget(
            category=Category.parse(category),
            limit=limit,
            user_id=user.user_id,
        )

        async with self._factory.unit_of_work() as uow:
            await uow.budgets.add(budget)
            await uow.commit()

        logger.info(
            "Saved %s budget of %s for %s (id=%s)",
            budget.category.value,
            budget.limit,
            user,
            budget.id,
        )

        publish_changes(
            self._factory.change_feed,
            user.user_id,
            ChangeCollection.BUDGETS,
            ChangeAction.CREATED,
            [budget.id],
        )
        return budget
