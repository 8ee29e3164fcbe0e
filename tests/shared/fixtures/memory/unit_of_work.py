"""Unit of work over the in-memory ledger store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from budgetbook.application.ports import LedgerUnitOfWork
from tests.shared.fixtures.memory.repositories import (
    InMemoryAccountRepository,
    InMemoryBudgetRepository,
    InMemoryTransactionRepository,
)

if TYPE_CHECKING:
    from budgetbook.application.context import UserContext
    from tests.shared.fixtures.memory.store import (
        DocumentKey,
        InMemoryLedgerStore,
    )

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(LedgerUnitOfWork):
    """
    Buffers writes and applies them in one step on commit.

    Nothing is visible to other units of work before ``commit()``; a
    conflicting concurrent commit makes ``commit()`` raise
    ``WriteConflictError`` and leaves the store unchanged.
    """

    def __init__(self, store: InMemoryLedgerStore, user_context: UserContext):
        self.store = store
        self.user_id: UUID = user_context.user_id
        self.expected: dict[DocumentKey, int] = {}
        self.pending: dict[DocumentKey, Any] = {}
        self._accounts = InMemoryAccountRepository(self)
        self._transactions = InMemoryTransactionRepository(self)
        self._budgets = InMemoryBudgetRepository(self)

    @property
    def accounts(self) -> InMemoryAccountRepository:
        return self._accounts

    @property
    def transactions(self) -> InMemoryTransactionRepository:
        return self._transactions

    @property
    def budgets(self) -> InMemoryBudgetRepository:
        return self._budgets

    async def commit(self) -> None:
        if self.pending:
            await self.store.apply(self.expected, self.pending)
            logger.debug("Committed %d document(s) for user %s", len(self.pending), self.user_id)
        self.expected = {}
        self.pending = {}

    async def rollback(self) -> None:
        self.expected = {}
        self.pending = {}
