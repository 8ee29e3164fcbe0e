"""Integration tests for the change notification WebSocket."""

import pytest
from starlette.websockets import WebSocketDisconnect

from tests.shared.fixtures.api import access_token

pytestmark = pytest.mark.integration


class TestChangesWebSocket:
    def test_rejects_invalid_token(self, test_client, api_v1_prefix):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with test_client.websocket_connect(f"{api_v1_prefix}/changes?token=garbage"):
                pass

        assert exc_info.value.code == 1008

    def test_streams_committed_changes(self, test_client, api_v1_prefix, auth_headers):
        url = f"{api_v1_prefix}/changes?token={access_token(auth_headers)}"

        with test_client.websocket_connect(url) as websocket:
            assert websocket.receive_json() == {"type": "ready"}

            account = test_client.post(
                f"{api_v1_prefix}/accounts",
                json={"name": "Checking", "balance": "100"},
                headers=auth_headers,
            ).json()
            created = websocket.receive_json()

            transaction = test_client.post(
                f"{api_v1_prefix}/transactions",
                json={
                    "amount": "10",
                    "type": "expense",
                    "category": "Food",
                    "account_id": account["id"],
                },
                headers=auth_headers,
            ).json()
            posted = [websocket.receive_json() for _ in range(2)]

        assert created["type"] == "change"
        assert created["collection"] == "accounts"
        assert created["action"] == "created"
        assert created["id"] == account["id"]
        assert [(m["collection"], m["action"], m["id"]) for m in posted] == [
            ("transactions", "created", transaction["id"]),
            ("accounts", "updated", account["id"]),
        ]

    def test_only_own_changes_are_delivered(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        other_auth_headers,
    ):
        url = f"{api_v1_prefix}/changes?token={access_token(auth_headers)}"

        with test_client.websocket_connect(url) as websocket:
            assert websocket.receive_json() == {"type": "ready"}

            test_client.post(
                f"{api_v1_prefix}/accounts",
                json={"name": "Bob's Checking"},
                headers=other_auth_headers,
            )
            own = test_client.post(
                f"{api_v1_prefix}/accounts",
                json={"name": "Alice's Checking"},
                headers=auth_headers,
            ).json()

            first = websocket.receive_json()

        assert first["id"] == own["id"]
