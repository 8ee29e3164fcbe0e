"""Value objects for the ledger domain."""

from budgetbook.domain.ledger.value_objects.amount import to_amount
from budgetbook.domain.ledger.value_objects.category import (
    CATEGORY_COLORS,
    CATEGORY_ICONS,
    Category,
)
from budgetbook.domain.ledger.value_objects.transaction_intent import (
    TransactionIntent,
)
from budgetbook.domain.ledger.value_objects.transaction_kind import TransactionKind

__all__ = [
    "CATEGORY_COLORS",
    "CATEGORY_ICONS",
    "Category",
    "TransactionIntent",
    "TransactionKind",
    "to_amount",
]
