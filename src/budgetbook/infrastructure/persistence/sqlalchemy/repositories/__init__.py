"""SQLAlchemy repository implementations."""

from budgetbook.infrastructure.persistence.sqlalchemy.repositories.account_repository import (  # NOQA: E501
    AccountRepositorySQLAlchemy,
)
from budgetbook.infrastructure.persistence.sqlalchemy.repositories.budget_repository import (  # NOQA: E501
    BudgetRepositorySQLAlchemy,
)
from budgetbook.infrastructure.persistence.sqlalchemy.repositories.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)
from budgetbook.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AccountRepositorySQLAlchemy",
    "BudgetRepositorySQLAlchemy",
    "TransactionRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
