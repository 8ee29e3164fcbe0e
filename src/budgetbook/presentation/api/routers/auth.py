"""Authentication router for user registration, login, and token management."""

import logging

from fastapi import APIRouter, status

from budgetbook.domain.user import User
from budgetbook.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
    SettingsDep,
)
from budgetbook.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from budgetbook_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, email=user.email, created_at=user.created_at)


def _create_auth_response(
    user: User,
    access_token: str,
    refresh_token: str,
    settings: Settings,
) -> AuthResponse:
    return AuthResponse(
        user=_user_response(user),
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=settings.jwt_access_token_expire_hours * 3600,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input (weak password)"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """Create an account with email and password and sign it in."""
    user, access_token, refresh_token = await auth_service.register(
        email=request.email,
        password=request.password,
    )
    await session.commit()

    return _create_auth_response(user, access_token, refresh_token, settings)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> AuthResponse:
    user, access_token, refresh_token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    return _create_auth_response(user, access_token, refresh_token, settings)


@router.post(
    "/refresh",
    summary="Refresh access token",
    responses={
        200: {"description": "New token pair issued"},
        401: {"description": "Invalid or expired refresh token"},
    },
)
async def refresh(
    request: RefreshRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> TokenResponse:
    access_token, refresh_token = await auth_service.refresh_token(request.refresh_token)
    return TokenResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=settings.jwt_access_token_expire_hours * 3600,
    )


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(current_user: CurrentUser) -> UserResponse:
    return _user_response(current_user)
