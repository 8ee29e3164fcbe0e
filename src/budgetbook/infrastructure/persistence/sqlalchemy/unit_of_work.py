"""SQLAlchemy unit of work for atomic ledger writes."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Optional

from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.orm.exc import StaleDataError

from budgetbook.application.ports import LedgerUnitOfWork
from budgetbook.domain.shared.exceptions import ConnectivityError, WriteConflictError
from budgetbook.infrastructure.persistence.sqlalchemy.repositories import (
    AccountRepositorySQLAlchemy,
    BudgetRepositorySQLAlchemy,
    TransactionRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from budgetbook.application.context import UserContext

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATEs for serialization failure and deadlock
_RETRYABLE_SQLSTATES = frozenset({"40001", "40P01"})


def translate_store_error(exc: BaseException) -> Optional[Exception]:
    """Map a driver/ORM exception to the domain error it stands for.

    Returns None when the exception is not a store error.
    """
    if isinstance(exc, (WriteConflictError, ConnectivityError)):
        return None
    if isinstance(exc, StaleDataError):
        return WriteConflictError()
    if isinstance(exc, DBAPIError):
        orig = getattr(exc, "orig", None)
        if getattr(orig, "sqlstate", None) in _RETRYABLE_SQLSTATES:
            return WriteConflictError()
        if isinstance(exc, OperationalError) and "locked" in str(orig).lower():
            # SQLite reports lock contention as OperationalError
            return WriteConflictError()
        if isinstance(exc, (OperationalError, InterfaceError)) or exc.connection_invalidated:
            return ConnectivityError(details={"error": str(orig)})
        return None
    if isinstance(exc, OSError):
        return ConnectivityError(details={"error": str(exc)})
    return None


class SQLAlchemyUnitOfWork(LedgerUnitOfWork):
    """
    One session, one database transaction.

    The session is opened on ``__aenter__`` and closed on ``__aexit__``.
    Store exceptions escaping the block are re-raised as
    ``WriteConflictError`` or ``ConnectivityError``.
    """

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        user_context: UserContext,
    ):
        self._session_maker = session_maker
        self._user_context = user_context
        self._session: Optional[AsyncSession] = None
        self._accounts: Optional[AccountRepositorySQLAlchemy] = None
        self._transactions: Optional[TransactionRepositorySQLAlchemy] = None
        self._budgets: Optional[BudgetRepositorySQLAlchemy] = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            msg = "Unit of work used outside of its 'async with' block"
            raise RuntimeError(msg)
        return self._session

    @property
    def accounts(self) -> AccountRepositorySQLAlchemy:
        if self._accounts is None:
            self._accounts = AccountRepositorySQLAlchemy(self.session, self._user_context)
        return self._accounts

    @property
    def transactions(self) -> TransactionRepositorySQLAlchemy:
        if self._transactions is None:
            self._transactions = TransactionRepositorySQLAlchemy(
                self.session,
                self._user_context,
            )
        return self._transactions

    @property
    def budgets(self) -> BudgetRepositorySQLAlchemy:
        if self._budgets is None:
            self._budgets = BudgetRepositorySQLAlchemy(self.session, self._user_context)
        return self._budgets

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        self._session = self._session_maker()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        session = self.session
        try:
            await session.rollback()
        except (OperationalError, InterfaceError, OSError):
            logger.warning("Rollback failed, discarding session", exc_info=True)
        finally:
            await session.close()
            self._session = None

        if exc is not None:
            translated = translate_store_error(exc)
            if translated is not None:
                logger.debug("Store error in unit of work: %r", exc)
                raise translated from exc

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except (DBAPIError, StaleDataError, OSError) as exc:
            translated = translate_store_error(exc)
            if translated is None:
                raise
            raise translated from exc

    async def rollback(self) -> None:
        await self.session.rollback()
