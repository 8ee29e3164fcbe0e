"""Unit-of-work port for atomic ledger writes.

A unit of work groups reads and writes against accounts, transactions and
budgets so that they commit together or not at all. Every instance is
scoped to one user and is used for exactly one attempt: callers that retry
open a fresh one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from budgetbook.domain.ledger.repositories import (
        AccountRepository,
        BudgetRepository,
        TransactionRepository,
    )


class LedgerUnitOfWork(ABC):
    """
    Async context manager around one atomic read-modify-write.

    Leaving the block without ``commit()`` (or with an exception) rolls
    everything back. ``commit()`` raises ``WriteConflictError`` when a
    document read inside the block was changed by someone else in the
    meantime, and ``ConnectivityError`` when the store cannot be reached.
    """

    @property
    @abstractmethod
    def accounts(self) -> AccountRepository:
        """Account repository bound to this unit of work."""

    @property
    @abstractmethod
    def transactions(self) -> TransactionRepository:
        """Transaction repository bound to this unit of work."""

    @property
    @abstractmethod
    def budgets(self) -> BudgetRepository:
        """Budget repository bound to this unit of work."""

    @abstractmethod
    async def commit(self) -> None:
        """Make all changes of this unit of work durable at once."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending changes."""

    async def __aenter__(self) -> LedgerUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        # Uncommitted work is always discarded, also on success paths that
        # never called commit() (e.g. read-only queries).
        await self.rollback()
