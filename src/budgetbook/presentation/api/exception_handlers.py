"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with a consistent format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from budgetbook.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from budgetbook_auth import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CATEGORY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TRANSACTION_KIND: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SAME_ACCOUNT_TRANSFER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TRANSACTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BUDGET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.WRITE_CONFLICT: status.HTTP_409_CONFLICT,
    # 503 / 504 - store problems
    ErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.POSTING_TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST

    return status.HTTP_400_BAD_REQUEST


def _auth_error_code(exc: AuthError) -> ErrorCode:
    if isinstance(exc, WeakPasswordError):
        return ErrorCode.WEAK_PASSWORD
    if isinstance(exc, InvalidCredentialsError):
        return ErrorCode.INVALID_CREDENTIALS
    if isinstance(exc, InvalidTokenError):
        return ErrorCode.INVALID_TOKEN
    return ErrorCode.INVALID_CREDENTIALS


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None  # NOQA: PLR2004
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        code = _auth_error_code(exc)

        logger.warning(
            "Authentication error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )

        return _create_error_response(
            status_code=ERROR_CODE_TO_STATUS[code],
            message=exc.message,
            code=code.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all so clients always receive the same error shape."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
