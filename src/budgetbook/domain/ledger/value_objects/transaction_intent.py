"""Value object describing a transaction a user wants to post.

An intent is validated at construction time so that the posting command can
reject malformed input before any store access happens.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from budgetbook.domain.ledger.exceptions import (
    NegativeFeeError,
    NonPositiveAmountError,
    SameAccountTransferError,
)
from budgetbook.domain.ledger.value_objects.amount import to_amount
from budgetbook.domain.ledger.value_objects.category import Category
from budgetbook.domain.ledger.value_objects.transaction_kind import TransactionKind
from budgetbook.domain.shared.exceptions import ErrorCode, ValidationError
from budgetbook.domain.shared.time import today_utc


@dataclass(frozen=True)
class TransactionIntent:
    """
    Immutable, validated posting request.

    Invariants (checked in ``__post_init__``):
    - ``amount > 0`` and ``service_fee >= 0``
    - ``to_account_id`` is set if and only if ``kind`` is TRANSFER
    - ``to_account_id != account_id``
    - transfers carry the Transfer category, other kinds never do
    - only transfers carry a non-zero service fee
    """

    amount: Decimal
    kind: TransactionKind
    category: Category
    account_id: UUID
    date: date
    to_account_id: Optional[UUID] = None
    description: str = ""
    service_fee: Decimal = Decimal("0")

    def __post_init__(self) -> None:  # NOQA: C901
        if self.amount <= 0:
            raise NonPositiveAmountError(self.amount)

        if self.service_fee < 0:
            raise NegativeFeeError(self.service_fee)

        if self.kind.is_transfer:
            if self.to_account_id is None:
                msg = "Transfers require a destination account"
                raise ValidationError(msg, details={"field": "to_account_id"})
            if self.to_account_id == self.account_id:
                raise SameAccountTransferError(self.account_id)
            if self.category is not Category.TRANSFER:
                msg = "Transfers must use the Transfer category"
                raise ValidationError(msg, code=ErrorCode.INVALID_CATEGORY)
        else:
            if self.to_account_id is not None:
                msg = f"Only transfers may have a destination account, got {self.kind.value}"
                raise ValidationError(msg, details={"field": "to_account_id"})
            if self.category is Category.TRANSFER:
                msg = "The Transfer category is reserved for transfers"
                raise ValidationError(msg, code=ErrorCode.INVALID_CATEGORY)
            if self.service_fee != 0:
                msg = "Only transfers may carry a service fee"
                raise ValidationError(msg, details={"field": "service_fee"})

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        amount: Any,
        kind: str | TransactionKind,
        account_id: UUID,
        category: str | Category | None = None,
        to_account_id: Optional[UUID] = None,
        date: Optional[date] = None,
        description: Optional[str] = None,
        service_fee: Any = None,
    ) -> TransactionIntent:
        """Build an intent from loosely-typed input, applying the form defaults.

        - transfers are forced into the Transfer category
        - the service fee defaults to 0 and is dropped for non-transfers
        - the occurrence date defaults to today (UTC)
        """
        parsed_kind = TransactionKind.parse(kind)

        if parsed_kind.is_transfer:
            parsed_category = Category.TRANSFER
            fee = to_amount(service_fee, "service_fee") if service_fee is not None else Decimal("0")
        else:
            if category is None or (isinstance(category, str) and not category.strip()):
                msg = f"Category is required for {parsed_kind.value.lower()} transactions"
                raise ValidationError(msg, code=ErrorCode.INVALID_CATEGORY)
            parsed_category = Category.parse(category)
            fee = Decimal("0")

        if account_id is None:
            msg = "Account is required"
            raise ValidationError(msg, details={"field": "account_id"})

        return cls(
            amount=to_amount(amount),
            kind=parsed_kind,
            category=parsed_category,
            account_id=account_id,
            to_account_id=to_account_id if parsed_kind.is_transfer else None,
            date=date or today_utc(),
            description=(description or "").strip(),
            service_fee=fee,
        )

    @property
    def total_debit(self) -> Decimal:
        """What leaves the source account for a transfer (amount plus fee)."""
        return self.amount + self.service_fee
