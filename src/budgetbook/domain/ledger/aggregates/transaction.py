"""Transaction aggregate for the ledger domain."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from budgetbook.domain.ledger.value_objects import (
    Category,
    TransactionIntent,
    TransactionKind,
)
from budgetbook.domain.shared.time import utc_now


class Transaction:
    """
    An immutable record of one posted money movement.

    A transaction is written in the same unit of work as the balance changes
    it causes and is never edited afterwards. There are no setters; the only
    lifecycle step after creation is deletion.
    """

    __slots__ = (
        "_account_id",
        "_amount",
        "_category",
        "_created_at",
        "_date",
        "_description",
        "_id",
        "_kind",
        "_service_fee",
        "_to_account_id",
        "_user_id",
    )

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        intent: TransactionIntent,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._amount = intent.amount
        self._kind = intent.kind
        self._category = intent.category
        self._account_id = intent.account_id
        self._to_account_id = intent.to_account_id
        self._date = intent.date
        self._description = intent.description
        self._service_fee = intent.service_fee
        self._created_at = created_at or utc_now()

    @classmethod
    def create_from_intent(
        cls,
        intent: TransactionIntent,
        user_id: UUID,
    ) -> "Transaction":
        """Create a new record with a generated id and creation timestamp."""
        return cls(user_id=user_id, intent=intent)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        amount: Decimal,
        kind: TransactionKind,
        category: Category,
        account_id: UUID,
        date: date,
        created_at: datetime,
        to_account_id: Optional[UUID] = None,
        description: str = "",
        service_fee: Decimal = Decimal("0"),
    ) -> "Transaction":
        intent = TransactionIntent(
            amount=amount,
            kind=kind,
            category=category,
            account_id=account_id,
            to_account_id=to_account_id,
            date=date,
            description=description or "",
            service_fee=service_fee,
        )
        return cls(user_id=user_id, intent=intent, id=id, created_at=created_at)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def kind(self) -> TransactionKind:
        return self._kind

    @property
    def category(self) -> Category:
        return self._category

    @property
    def account_id(self) -> UUID:
        return self._account_id

    @property
    def to_account_id(self) -> Optional[UUID]:
        return self._to_account_id

    @property
    def date(self) -> date:
        return self._date

    @property
    def description(self) -> str:
        return self._description

    @property
    def service_fee(self) -> Decimal:
        return self._service_fee

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_income(self) -> bool:
        return self._kind == TransactionKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self._kind == TransactionKind.EXPENSE

    @property
    def is_transfer(self) -> bool:
        return self._kind == TransactionKind.TRANSFER

    @property
    def net_effect(self) -> Decimal:
        """Contribution to a day's net total: +income, -expense, transfers 0."""
        if self.is_income:
            return self._amount
        if self.is_expense:
            return -self._amount
        return Decimal("0")

    def as_intent(self) -> TransactionIntent:
        return TransactionIntent(
            amount=self._amount,
            kind=self._kind,
            category=self._category,
            account_id=self._account_id,
            to_account_id=self._to_account_id,
            date=self._date,
            description=self._description,
            service_fee=self._service_fee,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id}, kind={self._kind.value}, "
            f"amount={self._amount}, category={self._category.value}, "
            f"date={self._date.isoformat()})"
        )
