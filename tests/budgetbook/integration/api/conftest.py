"""Pytest fixtures for API integration tests.

Every test gets a fresh app on its own SQLite file; the lifespan creates
the tables, so no database fixture is needed here.
"""

from decimal import Decimal
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from budgetbook.presentation.api.app import API_V1_PREFIX, create_app
from budgetbook_config.settings import Settings
from tests.shared.fixtures.api import register_user


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with cheap password hashing."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api-test.db'}",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
        currency="Rs.",
        ledger_retry_wait_seconds=0,
        ledger_max_amount=Decimal("1000000"),
    )


@pytest.fixture
def test_client(api_settings) -> Iterator[TestClient]:
    """Client with the app's lifespan running."""
    app = create_app(api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers(test_client) -> dict[str, str]:
    return register_user(test_client, "alice@example.com")


@pytest.fixture
def other_auth_headers(test_client) -> dict[str, str]:
    return register_user(test_client, "bob@example.com")
