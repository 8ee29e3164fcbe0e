"""Repository interfaces for the ledger domain."""

from budgetbook.domain.ledger.repositories.account_repository import (
    AccountRepository,
)
from budgetbook.domain.ledger.repositories.budget_repository import BudgetRepository
from budgetbook.domain.ledger.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = ["AccountRepository", "BudgetRepository", "TransactionRepository"]
