"""Shared domain primitives (exceptions, time helpers, month)."""

from budgetbook.domain.shared.exceptions import (
    ConflictError,
    ConnectivityError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PostingTimeoutError,
    ValidationError,
    WriteConflictError,
)
from budgetbook.domain.shared.month import Month
from budgetbook.domain.shared.time import ensure_tz_aware, today_utc, utc_now

__all__ = [
    "ConflictError",
    "ConnectivityError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "Month",
    "PostingTimeoutError",
    "ValidationError",
    "WriteConflictError",
    "ensure_tz_aware",
    "today_utc",
    "utc_now",
]
