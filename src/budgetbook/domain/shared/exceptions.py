"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions inherit from DomainException
to enable centralized exception handling in the presentation layer.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    INVALID_TRANSACTION_KIND = "INVALID_TRANSACTION_KIND"
    SAME_ACCOUNT_TRANSFER = "SAME_ACCOUNT_TRANSFER"

    WEAK_PASSWORD = "WEAK_PASSWORD"

    # Authentication Errors (401)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"
    BUDGET_NOT_FOUND = "BUDGET_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    WRITE_CONFLICT = "WRITE_CONFLICT"

    # Store Errors (503/504)
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    POSTING_TIMEOUT = "POSTING_TIMEOUT"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class WriteConflictError(ConflictError):
    """Raised when a concurrent writer changed a document read in a unit of work."""

    def __init__(
        self,
        message: str = "The resource was modified by another request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.WRITE_CONFLICT, details)


class ConnectivityError(DomainException):
    """Raised when the backing store cannot be reached."""

    def __init__(
        self,
        message: str = "The data store is currently unavailable",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.STORE_UNAVAILABLE, details)


class PostingTimeoutError(DomainException):
    """Raised when an atomic posting does not finish in time."""

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            message=f"Posting did not complete within {timeout_seconds:g} seconds",
            code=ErrorCode.POSTING_TIMEOUT,
            details={"timeout_seconds": timeout_seconds},
        )
