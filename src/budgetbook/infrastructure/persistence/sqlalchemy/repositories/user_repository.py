"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from budgetbook.domain.shared.time import ensure_tz_aware
from budgetbook.domain.user import Email, EmailAlreadyExistsError, User, UserRepository
from budgetbook.infrastructure.persistence.sqlalchemy.models import UserModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """User repository; not user-scoped since it resolves identities."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._session.get(UserModel, user_id)
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        normalized = email if isinstance(email, Email) else Email(email)
        stmt = select(UserModel).where(UserModel.email == normalized.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> None:
        self._session.add(
            UserModel(
                id=user.id,
                email=user.email,
                password_hash=user.password_hash,
                created_at=user.created_at,
            ),
        )
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            raise EmailAlreadyExistsError(user.email) from exc

        logger.info("User saved: %s (ID: %s)", user.email, user.id)

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
        )
