"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from budgetbook.domain.user import EmailAlreadyExistsError, User
from budgetbook_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)

if TYPE_CHECKING:
    from budgetbook.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Bridges the generic auth primitives (password hashing, JWT tokens) and
    the User aggregate:
    - User registration
    - Login with password
    - Token refresh

    The caller owns the session and commits after ``register``.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _create_token_pair(self, user: User) -> tuple[str, str]:
        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )
        refresh_token = self._jwt_service.create_refresh_token(
            user_id=user.id,
            email=user.email,
        )
        return access_token, refresh_token

    async def register(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str, str]:
        existing_user = await self._user_repo.find_by_email(email)
        if existing_user is not None:
            raise EmailAlreadyExistsError(existing_user.email)

        password_hash = self._password_service.hash(password)
        user = User(email=email, password_hash=password_hash)
        await self._user_repo.save(user)

        access_token, refresh_token = self._create_token_pair(user)

        logger.info("User registered: %s", user.email)
        return user, access_token, refresh_token

    async def login(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str, str]:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            logger.info("Failed login attempt for %s", user.email)
            raise InvalidCredentialsError

        access_token, refresh_token = self._create_token_pair(user)

        logger.info("User logged in: %s", user.email)
        return user, access_token, refresh_token

    async def refresh_token(self, refresh_token: str) -> tuple[str, str]:
        payload = self._jwt_service.verify_token(refresh_token)

        if not payload.is_refresh_token():
            msg = "Not a refresh token"
            raise InvalidTokenError(msg)
        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            msg = "User not found"
            raise InvalidTokenError(msg)

        new_access_token, new_refresh_token = self._create_token_pair(user)

        logger.debug("Tokens refreshed for user: %s", user.email)
        return new_access_token, new_refresh_token

    async def get_user(self, user_id: UUID) -> User:
        """Resolve the user behind a verified access token.

        Raises
        ------
        InvalidTokenError
            If the user no longer exists
        """
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            msg = "User not found"
            raise InvalidTokenError(msg)
        return user

    def verify_access_token(self, token: str) -> TokenPayload:
        payload = self._jwt_service.verify_token(token)
        if not payload.is_access_token():
            msg = "Not an access token"
            raise InvalidTokenError(msg)
        return payload
