"""Ledger domain exceptions."""

from decimal import Decimal
from typing import Any
from uuid import UUID

from budgetbook.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class AccountNotFoundError(EntityNotFoundError):
    """Raised when a referenced account does not exist for the current user."""

    def __init__(self, account_id: str | UUID | None = None, role: str = "") -> None:
        label = f"{role.capitalize()} account" if role else "Account"
        super().__init__(
            message=f"{label} '{account_id or 'unknown'}' not found",
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={
                "account_id": str(account_id) if account_id else None,
                "role": role or None,
            },
        )


class TransactionNotFoundError(EntityNotFoundError):
    """Raised when a transaction cannot be found."""

    def __init__(self, transaction_id: str | UUID) -> None:
        super().__init__(
            message=f"Transaction '{transaction_id}' not found",
            code=ErrorCode.TRANSACTION_NOT_FOUND,
            details={"transaction_id": str(transaction_id)},
        )


class BudgetNotFoundError(EntityNotFoundError):
    """Raised when a budget cannot be found."""

    def __init__(self, budget_id: str | UUID) -> None:
        super().__init__(
            message=f"Budget '{budget_id}' not found",
            code=ErrorCode.BUDGET_NOT_FOUND,
            details={"budget_id": str(budget_id)},
        )


class NonPositiveAmountError(ValidationError):
    """Raised when an amount that must be positive is zero or negative."""

    def __init__(self, amount: Any, field: str = "amount") -> None:
        super().__init__(
            message=f"{field.capitalize()} must be positive, got {amount}",
            code=ErrorCode.INVALID_AMOUNT,
            details={field: str(amount)},
        )


class NegativeFeeError(ValidationError):
    """Raised when a transfer service fee is negative."""

    def __init__(self, fee: Decimal) -> None:
        super().__init__(
            message=f"Service fee cannot be negative, got {fee}",
            code=ErrorCode.INVALID_AMOUNT,
            details={"service_fee": str(fee)},
        )


class SameAccountTransferError(ValidationError):
    """Raised when a transfer names the same account as source and destination."""

    def __init__(self, account_id: UUID) -> None:
        super().__init__(
            message="Transfer destination must differ from the source account",
            code=ErrorCode.SAME_ACCOUNT_TRANSFER,
            details={"account_id": str(account_id)},
        )


class EmptyAccountNameError(ValidationError):
    """Raised when an account name is empty."""

    def __init__(self) -> None:
        super().__init__(
            message="Account name cannot be empty",
            code=ErrorCode.VALIDATION_ERROR,
        )
