"""SQLAlchemy models. Importing this package registers every table."""

from budgetbook.infrastructure.persistence.sqlalchemy.models.account_model import (
    AccountModel,
)
from budgetbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from budgetbook.infrastructure.persistence.sqlalchemy.models.budget_model import (
    BudgetModel,
)
from budgetbook.infrastructure.persistence.sqlalchemy.models.transaction_model import (  # NOQA: E501
    TransactionModel,
)
from budgetbook.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "AccountModel",
    "Base",
    "BudgetModel",
    "TimestampMixin",
    "TransactionModel",
    "UserModel",
]
