"""Transaction kind enumeration."""

from enum import Enum

from budgetbook.domain.shared.exceptions import ErrorCode, ValidationError


class TransactionKind(str, Enum):
    """What a transaction does to the source account's balance."""

    INCOME = "INCOME"  # Credits the source account
    EXPENSE = "EXPENSE"  # Debits the source account
    TRANSFER = "TRANSFER"  # Moves money to a destination account, fee stays behind

    @classmethod
    def parse(cls, value: "str | TransactionKind") -> "TransactionKind":
        """Accept enum members and case-insensitive names ("income", "EXPENSE")."""
        if isinstance(value, TransactionKind):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as e:
            valid = ", ".join(k.value.lower() for k in cls)
            msg = f"Invalid transaction kind '{value}'. Valid kinds: {valid}"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_TRANSACTION_KIND,
                details={"kind": str(value)},
            ) from e

    @property
    def is_transfer(self) -> bool:
        return self is TransactionKind.TRANSFER
