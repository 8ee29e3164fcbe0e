"""SQLAlchemy implementation of BudgetRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import delete, select

from budgetbook.domain.ledger.entities import Budget
from budgetbook.domain.ledger.repositories import BudgetRepository
from budgetbook.domain.ledger.value_objects import Category
from budgetbook.domain.shared.time import ensure_tz_aware
from budgetbook.infrastructure.persistence.sqlalchemy.models import BudgetModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from budgetbook.application.context import UserContext

logger = logging.getLogger(__name__)


class BudgetRepositorySQLAlchemy(BudgetRepository):
    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def add(self, budget: Budget) -> None:
        self._session.add(
            BudgetModel(
                id=budget.id,
                user_id=self._user_id,
                category=budget.category.value,
                limit_amount=budget.limit,
                created_at=budget.created_at,
            ),
        )
        await self._session.flush()
        logger.debug("Budget added: %s (%s)", budget.id, budget.category.value)

    async def find_by_id(self, budget_id: UUID) -> Optional[Budget]:
        stmt = select(BudgetModel).where(
            BudgetModel.id == budget_id,
            BudgetModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[Budget]:
        stmt = (
            select(BudgetModel)
            .where(BudgetModel.user_id == self._user_id)
            .order_by(BudgetModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def delete(self, budget_id: UUID) -> bool:
        stmt = delete(BudgetModel).where(
            BudgetModel.id == budget_id,
            BudgetModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        deleted = bool(result.rowcount)
        if deleted:
            logger.info("Budget deleted: %s", budget_id)
        return deleted

    def _map_to_domain(self, model: BudgetModel) -> Budget:
        return Budget.reconstitute(
            id=model.id,
            user_id=model.user_id,
            category=Category.parse(model.category),
            limit=model.limit_amount,
            created_at=ensure_tz_aware(model.created_at),
        )
