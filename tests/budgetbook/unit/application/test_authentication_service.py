"""Unit tests for AuthenticationService with a mocked user repository."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from budgetbook.application.services import AuthenticationService
from budgetbook.domain.user import EmailAlreadyExistsError, User
from budgetbook_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    WeakPasswordError,
)

SECRET = "unit-test-secret-key-that-is-long-enough"


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=SECRET)


@pytest.fixture
def user_repository() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    repo.find_by_id.return_value = None
    return repo


@pytest.fixture
def service(user_repository, password_service, jwt_service) -> AuthenticationService:
    return AuthenticationService(user_repository, password_service, jwt_service)


@pytest.fixture
def existing_user(password_service) -> User:
    return User(
        email="someone@example.com",
        password_hash=password_service.hash("correct-horse"),
    )


class TestRegister:
    async def test_register_saves_user_and_issues_tokens(
        self,
        service,
        user_repository,
        jwt_service,
    ):
        user, access, refresh = await service.register("New@Example.com", "long-enough")

        user_repository.save.assert_awaited_once_with(user)
        assert user.email == "new@example.com"
        assert jwt_service.verify_token(access).is_access_token()
        assert jwt_service.verify_token(refresh).is_refresh_token()
        assert jwt_service.verify_token(access).user_id == user.id

    async def test_duplicate_email(self, service, user_repository, existing_user):
        user_repository.find_by_email.return_value = existing_user

        with pytest.raises(EmailAlreadyExistsError):
            await service.register(existing_user.email, "long-enough")

        user_repository.save.assert_not_awaited()

    async def test_weak_password(self, service, user_repository):
        with pytest.raises(WeakPasswordError):
            await service.register("new@example.com", "short")

        user_repository.save.assert_not_awaited()


class TestLogin:
    async def test_login(self, service, user_repository, existing_user):
        user_repository.find_by_email.return_value = existing_user

        user, access, _ = await service.login(existing_user.email, "correct-horse")

        assert user is existing_user
        assert service.verify_access_token(access).user_id == existing_user.id

    async def test_wrong_password(self, service, user_repository, existing_user):
        user_repository.find_by_email.return_value = existing_user

        with pytest.raises(InvalidCredentialsError):
            await service.login(existing_user.email, "wrong-horse")

    async def test_unknown_email(self, service):
        with pytest.raises(InvalidCredentialsError):
            await service.login("nobody@example.com", "whatever1")


class TestTokens:
    async def test_refresh(self, service, user_repository, existing_user, jwt_service):
        user_repository.find_by_id.return_value = existing_user
        refresh = jwt_service.create_refresh_token(existing_user.id, existing_user.email)

        access, new_refresh = await service.refresh_token(refresh)

        assert service.verify_access_token(access).user_id == existing_user.id
        assert jwt_service.verify_token(new_refresh).is_refresh_token()

    async def test_refresh_rejects_access_token(self, service, existing_user, jwt_service):
        access = jwt_service.create_access_token(existing_user.id, existing_user.email)

        with pytest.raises(InvalidTokenError):
            await service.refresh_token(access)

    async def test_refresh_for_deleted_user(self, service, jwt_service):
        refresh = jwt_service.create_refresh_token(uuid4(), "gone@example.com")

        with pytest.raises(InvalidTokenError):
            await service.refresh_token(refresh)

    def test_access_check_rejects_refresh_token(self, service, jwt_service):
        refresh = jwt_service.create_refresh_token(uuid4(), "someone@example.com")

        with pytest.raises(InvalidTokenError):
            service.verify_access_token(refresh)

    async def test_get_user(self, service, user_repository, existing_user):
        user_repository.find_by_id.return_value = existing_user

        assert await service.get_user(existing_user.id) is existing_user

        user_repository.find_by_id.return_value = None
        with pytest.raises(InvalidTokenError):
            await service.get_user(existing_user.id)
