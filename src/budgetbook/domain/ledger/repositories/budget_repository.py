"""Budget repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from budgetbook.domain.ledger.entities import Budget


class BudgetRepository(ABC):
    """Repository interface for Budget entities, scoped to one user."""

    @abstractmethod
    async def add(self, budget: Budget) -> None:
        """Persist a new budget."""

    @abstractmethod
    async def find_by_id(self, budget_id: UUID) -> Optional[Budget]:
        """Find budget by ID."""

    @abstractmethod
    async def find_all(self) -> List[Budget]:
        """All budgets, newest first."""

    @abstractmethod
    async def delete(self, budget_id: UUID) -> bool:
        """Delete a budget. Returns False when it did not exist."""
