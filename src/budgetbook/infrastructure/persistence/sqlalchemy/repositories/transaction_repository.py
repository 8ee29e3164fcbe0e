"""SQLAlchemy implementation of TransactionRepository."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from budgetbook.domain.ledger.aggregates import Transaction
from budgetbook.domain.ledger.repositories import TransactionRepository
from budgetbook.domain.ledger.value_objects import Category, TransactionKind
from budgetbook.domain.shared.exceptions import ConflictError
from budgetbook.domain.shared.time import ensure_tz_aware
from budgetbook.infrastructure.persistence.sqlalchemy.models import TransactionModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from budgetbook.application.context import UserContext

logger = logging.getLogger(__name__)


class TransactionRepositorySQLAlchemy(TransactionRepository):
    """SQLAlchemy implementation of the transaction repository."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def add(self, transaction: Transaction) -> None:
        self._session.add(self._create_model_from_domain(transaction))
        try:
            await self._session.flush()
        except IntegrityError as exc:
            msg = f"Transaction '{transaction.id}' already exists"
            raise ConflictError(msg, details={"transaction_id": str(transaction.id)}) from exc

        logger.debug("Transaction added: %s", transaction.id)

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        stmt = select(TransactionModel).where(
            TransactionModel.id == transaction_id,
            TransactionModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[Transaction]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.user_id == self._user_id)
            .order_by(TransactionModel.date.desc(), TransactionModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        stmt = (
            select(TransactionModel)
            .where(
                TransactionModel.user_id == self._user_id,
                TransactionModel.date >= start_date,
                TransactionModel.date <= end_date,
            )
            .order_by(TransactionModel.date.desc(), TransactionModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def delete(self, transaction_id: UUID) -> bool:
        stmt = delete(TransactionModel).where(
            TransactionModel.id == transaction_id,
            TransactionModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        deleted = bool(result.rowcount)
        if deleted:
            logger.info("Transaction deleted: %s", transaction_id)
        return deleted

    def _create_model_from_domain(self, transaction: Transaction) -> TransactionModel:
        return TransactionModel(
            id=transaction.id,
            user_id=self._user_id,
            amount=transaction.amount,
            kind=transaction.kind.value,
            category=transaction.category.value,
            account_id=transaction.account_id,
            to_account_id=transaction.to_account_id,
            date=transaction.date,
            description=transaction.description,
            service_fee=transaction.service_fee,
            created_at=transaction.created_at,
        )

    def _map_to_domain(self, model: TransactionModel) -> Transaction:
        return Transaction.reconstitute(
            id=model.id,
            user_id=model.user_id,
            amount=model.amount,
            kind=TransactionKind(model.kind),
            category=Category.parse(model.category),
            account_id=model.account_id,
            to_account_id=model.to_account_id,
            date=model.date,
            description=model.description or "",
            service_fee=model.service_fee,
            created_at=ensure_tz_aware(model.created_at),
        )
