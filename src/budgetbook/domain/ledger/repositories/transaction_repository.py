"""Transaction repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from budgetbook.domain.ledger.aggregates import Transaction


class TransactionRepository(ABC):
    """
    Repository interface for Transaction records.

    Records are append/delete only: ``add`` refuses to overwrite an existing
    id, and there is no update method.
    """

    @abstractmethod
    async def add(self, transaction: Transaction) -> None:
        """Persist a new transaction record."""

    @abstractmethod
    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """Find transaction by ID."""

    @abstractmethod
    async def find_all(self) -> List[Transaction]:
        """All transactions, newest occurrence date first."""

    @abstractmethod
    async def find_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> List[Transaction]:
        """Transactions with ``start_date <= date <= end_date``, newest first."""

    @abstractmethod
    async def delete(self, transaction_id: UUID) -> bool:
        """Delete a record. Returns False when it did not exist."""
