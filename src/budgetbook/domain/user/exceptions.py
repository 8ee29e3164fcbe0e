"""User domain exceptions."""

from budgetbook.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address does not have a valid format."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.VALIDATION_ERROR)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
        )
