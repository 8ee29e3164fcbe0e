"""SQLAlchemy implementation of the LedgerFactory protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from budgetbook.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyUnitOfWork,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from budgetbook.application.context import UserContext
    from budgetbook.application.ports import ChangeFeed


class SQLAlchemyLedgerFactory:
    """Hands out a fresh SQLAlchemy unit of work per call."""

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        user_context: UserContext,
        change_feed: Optional[ChangeFeed] = None,
    ):
        self._session_maker = session_maker
        self._user_context = user_context
        self._change_feed = change_feed

    @property
    def user_context(self) -> UserContext:
        return self._user_context

    @property
    def change_feed(self) -> Optional[ChangeFeed]:
        return self._change_feed

    def unit_of_work(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(self._session_maker, self._user_context)
