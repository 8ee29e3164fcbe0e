"""Email/password identity primitives: bcrypt hashing and JWT sessions."""

from budgetbook_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from budgetbook_auth.schemas import TokenPayload
from budgetbook_auth.services import JWTService, PasswordHashingService

__all__ = [
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "JWTService",
    "PasswordHashingService",
    "TokenPayload",
    "WeakPasswordError",
]
