"""Budget entity."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID, uuid4

from budgetbook.domain.ledger.exceptions import NonPositiveAmountError
from budgetbook.domain.ledger.value_objects.amount import to_amount
from budgetbook.domain.ledger.value_objects.category import Category
from budgetbook.domain.shared.time import utc_now


class Budget:
    """
    A monthly spending limit for one category.

    Budgets are created and deleted, never edited. Several budgets may exist
    for the same category; each one is evaluated on its own.
    """

    def __init__(
        self,
        category: Category,
        limit: Any,
        user_id: UUID,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        parsed_limit = to_amount(limit, "limit")
        if parsed_limit <= 0:
            raise NonPositiveAmountError(parsed_limit, field="limit")

        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._category = category
        self._limit = parsed_limit
        self._created_at = created_at or utc_now()

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        user_id: UUID,
        category: Category,
        limit: Decimal,
        created_at: datetime,
    ) -> "Budget":
        return cls(
            id=id,
            user_id=user_id,
            category=category,
            limit=limit,
            created_at=created_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def category(self) -> Category:
        return self._category

    @property
    def limit(self) -> Decimal:
        return self._limit

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Budget):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Budget(id={self._id}, category={self._category.value}, limit={self._limit})"
