"""SQLAlchemy implementation of AccountRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm.exc import StaleDataError

from budgetbook.domain.ledger.entities import Account
from budgetbook.domain.ledger.repositories import AccountRepository
from budgetbook.domain.shared.exceptions import WriteConflictError
from budgetbook.domain.shared.time import ensure_tz_aware
from budgetbook.infrastructure.persistence.sqlalchemy.models import AccountModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from budgetbook.application.context import UserContext

logger = logging.getLogger(__name__)


class AccountRepositorySQLAlchemy(AccountRepository):
    """SQLAlchemy implementation of the account repository."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, account: Account) -> None:
        model = await self._find_model_by_id(account.id)

        if model:
            if model.version != account.version:
                # The account was read from an older snapshot than this session holds
                raise WriteConflictError(details={"account_id": str(account.id)})
            logger.debug("Updating account %s: balance %s", account.id, account.balance)
            model.name = account.name
            model.account_type = account.account_type
            model.balance = account.balance
        else:
            logger.debug("Creating new account: %s", account.name)
            self._session.add(self._create_model_from_domain(account))

        try:
            await self._session.flush()
        except StaleDataError as exc:
            raise WriteConflictError(details={"account_id": str(account.id)}) from exc

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        model = await self._find_model_by_id(account_id)

        if not model:
            return None

        return self._map_to_domain(model)

    async def find_all(self) -> list[Account]:
        stmt = (
            select(AccountModel)
            .where(AccountModel.user_id == self._user_id)
            .order_by(AccountModel.created_at, AccountModel.id)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def delete(self, account_id: UUID) -> bool:
        model = await self._find_model_by_id(account_id)

        if not model:
            return False

        await self._session.delete(model)
        try:
            await self._session.flush()
        except StaleDataError as exc:
            raise WriteConflictError(details={"account_id": str(account_id)}) from exc
        logger.info("Account deleted: %s", account_id)
        return True

    async def _find_model_by_id(self, account_id: UUID) -> Optional[AccountModel]:
        stmt = select(AccountModel).where(
            AccountModel.id == account_id,
            AccountModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _create_model_from_domain(self, account: Account) -> AccountModel:
        return AccountModel(
            id=account.id,
            user_id=self._user_id,
            name=account.name,
            account_type=account.account_type,
            balance=account.balance,
            created_at=account.created_at,
        )

    def _map_to_domain(self, model: AccountModel) -> Account:
        return Account.reconstitute(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            account_type=model.account_type,
            balance=model.balance,
            created_at=ensure_tz_aware(model.created_at),
            version=model.version,
        )
