"""Account repository interface.

Implementations are user-scoped via UserContext, meaning all queries
automatically filter by the current user's user_id.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from budgetbook.domain.ledger.entities import Account


class AccountRepository(ABC):
    """
    Repository interface for Account entities.

    Note: Implementations are scoped to a specific user via UserContext.
    Callers don't need to pass user_id explicitly.
    """

    @abstractmethod
    async def save(self, account: Account) -> None:
        """Insert a new account or write back a changed balance.

        Writing back an account whose stored version moved on since it was
        read raises ``WriteConflictError`` (at the latest on commit).
        """

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        """Find account by ID."""

    @abstractmethod
    async def find_all(self) -> List[Account]:
        """Find all accounts, oldest first."""

    @abstractmethod
    async def delete(self, account_id: UUID) -> bool:
        """Delete an account. Returns False when it did not exist."""
