"""In-memory repositories bound to an InMemoryUnitOfWork."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Callable, Optional
from uuid import UUID

from budgetbook.domain.ledger.aggregates import Transaction
from budgetbook.domain.ledger.entities import Account, Budget
from budgetbook.domain.ledger.repositories import (
    AccountRepository,
    BudgetRepository,
    TransactionRepository,
)
from budgetbook.domain.shared.exceptions import ConflictError, WriteConflictError
from tests.shared.fixtures.memory.store import ABSENT

if TYPE_CHECKING:
    from tests.shared.fixtures.memory.unit_of_work import (
        InMemoryUnitOfWork,
    )

ACCOUNTS = "accounts"
TRANSACTIONS = "transactions"
BUDGETS = "budgets"


def _copy_account(account: Account, version: int) -> Account:
    return Account.reconstitute(
        id=account.id,
        user_id=account.user_id,
        name=account.name,
        account_type=account.account_type,
        balance=account.balance,
        created_at=account.created_at,
        version=version,
    )


class _ScopedView:
    """Reads through the unit of work's pending writes, filtered by user."""

    def __init__(
        self,
        uow: InMemoryUnitOfWork,
        collection: str,
        copy: Callable[[Any, int], Any],
    ):
        self._uow = uow
        self._collection = collection
        self._copy = copy

    def get(self, doc_id: UUID, track: bool = True) -> Optional[Any]:
        key = (self._collection, doc_id)
        if key in self._uow.pending:
            value = self._uow.pending[key]
            if value is None:
                return None
            return self._copy(value, self._uow.expected.get(key, ABSENT))

        document = self._uow.store.get(key)
        if document is None or document.value.user_id != self._uow.user_id:
            return None
        if track:
            self._uow.expected.setdefault(key, document.version)
        return self._copy(document.value, document.version)

    def all(self) -> list[Any]:
        ids = {doc_id for doc_id, _ in self._uow.store.scan(self._collection)}
        ids.update(
            doc_id for (name, doc_id) in self._uow.pending if name == self._collection
        )
        found = (self.get(doc_id, track=False) for doc_id in ids)
        return [value for value in found if value is not None]

    def stage(self, doc_id: UUID, value: Any, expected_version: int) -> None:
        key = (self._collection, doc_id)
        self._uow.expected.setdefault(key, expected_version)
        self._uow.pending[key] = value

    def remove(self, doc_id: UUID) -> bool:
        if self.get(doc_id) is None:
            return False
        key = (self._collection, doc_id)
        self._uow.pending[key] = None
        return True


class InMemoryAccountRepository(AccountRepository):
    def __init__(self, uow: InMemoryUnitOfWork):
        self._view = _ScopedView(uow, ACCOUNTS, _copy_account)
        self._user_id = uow.user_id

    async def save(self, account: Account) -> None:
        existing = self._view.get(account.id)
        if existing is not None and existing.version != account.version:
            raise WriteConflictError(details={"account_id": str(account.id)})
        expected = existing.version if existing is not None else ABSENT
        self._view.stage(account.id, _copy_account(account, expected), expected)

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        return self._view.get(account_id)

    async def find_all(self) -> list[Account]:
        return sorted(self._view.all(), key=lambda a: (a.created_at, str(a.id)))

    async def delete(self, account_id: UUID) -> bool:
        return self._view.remove(account_id)


class InMemoryTransactionRepository(TransactionRepository):
    def __init__(self, uow: InMemoryUnitOfWork):
        self._view = _ScopedView(uow, TRANSACTIONS, lambda t, _version: t)

    async def add(self, transaction: Transaction) -> None:
        if self._view.get(transaction.id, track=False) is not None:
            msg = f"Transaction '{transaction.id}' already exists"
            raise ConflictError(msg)
        self._view.stage(transaction.id, transaction, ABSENT)

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        return self._view.get(transaction_id)

    async def find_all(self) -> list[Transaction]:
        return _newest_first(self._view.all())

    async def find_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        return _newest_first(
            t for t in self._view.all() if start_date <= t.date <= end_date
        )

    async def delete(self, transaction_id: UUID) -> bool:
        return self._view.remove(transaction_id)


class InMemoryBudgetRepository(BudgetRepository):
    def __init__(self, uow: InMemoryUnitOfWork):
        self._view = _ScopedView(uow, BUDGETS, lambda b, _version: b)

    async def add(self, budget: Budget) -> None:
        self._view.stage(budget.id, budget, ABSENT)

    async def find_by_id(self, budget_id: UUID) -> Optional[Budget]:
        return self._view.get(budget_id)

    async def find_all(self) -> list[Budget]:
        return sorted(self._view.all(), key=lambda b: b.created_at, reverse=True)

    async def delete(self, budget_id: UUID) -> bool:
        return self._view.remove(budget_id)


def _newest_first(transactions) -> list[Transaction]:
    return sorted(transactions, key=lambda t: (t.date, t.created_at), reverse=True)
