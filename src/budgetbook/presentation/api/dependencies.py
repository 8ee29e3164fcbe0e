"""FastAPI dependency injection for the budgetbook API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- User context for repository scoping
- Ledger factory and posting policy
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.requests import HTTPConnection
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from budgetbook.application.commands.ledger import PostingPolicy
from budgetbook.application.context import UserContext
from budgetbook.application.ports import ChangeFeed
from budgetbook.application.services import AuthenticationService
from budgetbook.domain.user import User
from budgetbook.infrastructure.persistence.sqlalchemy import SQLAlchemyLedgerFactory
from budgetbook.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from budgetbook_auth import InvalidTokenError, JWTService, PasswordHashingService
from budgetbook_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Application state
# -----------------------------------------------------------------------------


def get_api_settings(connection: HTTPConnection) -> Settings:
    """Settings the application was created with."""
    return connection.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def get_session_maker(connection: HTTPConnection) -> async_sessionmaker[AsyncSession]:
    return connection.app.state.session_maker


def get_change_feed(connection: HTTPConnection) -> ChangeFeed:
    return connection.app.state.change_feed


ChangeFeedDep = Annotated[ChangeFeed, Depends(get_change_feed)]


async def get_db_session(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
        refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def authenticate_token(token: str, auth_service: AuthenticationService) -> User:
    """
    Resolve the user behind an access token.

    Raises
    ------
    HTTPException
        401 if the token is invalid, not an access token, or the user is gone
    """
    try:
        payload = auth_service.verify_access_token(token)
        return await auth_service.get_user(payload.user_id)
    except InvalidTokenError as e:
        logger.warning("Rejected token: %s", e)
        raise _unauthorized(e.message) from e


async def get_current_user(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    return await authenticate_token(credentials.credentials, auth_service)


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


# -----------------------------------------------------------------------------
# User Context & Ledger Factory
# -----------------------------------------------------------------------------


async def get_user_context(user: CurrentUser) -> UserContext:
    """UserContext used to scope every repository to the current user."""
    return UserContext.create(user)


CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


async def get_ledger_factory(
    user_context: CurrentUserContext,
    change_feed: ChangeFeedDep,
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> SQLAlchemyLedgerFactory:
    """
    Ledger factory for the current user.

    Commands open their own units of work from it; nothing here needs an
    explicit commit.
    """
    return SQLAlchemyLedgerFactory(
        session_maker=session_maker,
        user_context=user_context,
        change_feed=change_feed,
    )


LedgerFactoryDep = Annotated[SQLAlchemyLedgerFactory, Depends(get_ledger_factory)]


def get_posting_policy(settings: SettingsDep) -> PostingPolicy:
    return PostingPolicy(
        max_attempts=settings.ledger_max_attempts,
        retry_wait_seconds=settings.ledger_retry_wait_seconds,
        timeout_seconds=settings.ledger_post_timeout_seconds,
        max_amount=settings.ledger_max_amount,
    )


PostingPolicyDep = Annotated[PostingPolicy, Depends(get_posting_policy)]
