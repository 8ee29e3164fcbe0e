"""User bounded context."""

from budgetbook.domain.user.aggregates import User
from budgetbook.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from budgetbook.domain.user.repositories import UserRepository
from budgetbook.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
