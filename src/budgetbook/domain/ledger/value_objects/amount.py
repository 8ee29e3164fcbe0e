"""Monetary amount normalization.

Amounts are plain Decimals in the ledger's single currency, with at most
two decimal places.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from budgetbook.domain.shared.exceptions import ErrorCode, ValidationError

CENT = Decimal("0.01")
DECIMAL_PLACES_LIMIT = -2


def to_amount(value: Any, field: str = "amount") -> Decimal:
    """Convert ``value`` to a Decimal with at most two decimal places.

    Floats are converted through ``str`` so ``0.1`` stays ``Decimal("0.1")``.
    """
    if isinstance(value, bool) or value is None:
        msg = f"{field.capitalize()} is required and must be numeric"
        raise ValidationError(msg, code=ErrorCode.INVALID_AMOUNT, details={field: value})

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        msg = f"Invalid {field} '{value}': not a number"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_AMOUNT,
            details={field: str(value)},
        ) from e

    if not amount.is_finite():
        msg = f"Invalid {field} '{value}': must be finite"
        raise ValidationError(msg, code=ErrorCode.INVALID_AMOUNT, details={field: str(value)})

    exponent = amount.as_tuple().exponent
    if isinstance(exponent, int) and exponent < DECIMAL_PLACES_LIMIT:
        if amount != amount.quantize(CENT):
            msg = f"{field.capitalize()} cannot have more than 2 decimal places"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_AMOUNT,
                details={field: str(value)},
            )
        amount = amount.quantize(CENT)

    return amount
