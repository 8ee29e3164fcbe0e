"""
Helpers for API integration tests.

Usage:
    from tests.shared.fixtures.api import register_user

    def test_something(test_client):
        headers = register_user(test_client, "someone@example.com")
"""

from fastapi.testclient import TestClient

from budgetbook.presentation.api.app import API_V1_PREFIX

TEST_PASSWORD = "correct-horse-battery"


def register_user(client: TestClient, email: str) -> dict[str, str]:
    """Register ``email`` and return its bearer headers."""
    response = client.post(
        f"{API_V1_PREFIX}/auth/register",
        json={"email": email, "password": TEST_PASSWORD},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def access_token(headers: dict[str, str]) -> str:
    return headers["Authorization"].removeprefix("Bearer ")
