"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from budgetbook.domain.user.aggregates import User
from budgetbook.domain.user.value_objects import Email


class UserRepository(ABC):
    """Repository interface for User aggregates (not user-scoped)."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by their ID.

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Persist a new user.

        Raises
        ------
        EmailAlreadyExistsError
            If another user already has this email
        """
