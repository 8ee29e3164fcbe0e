"""Unit tests for InMemoryChangeFeed."""

from uuid import uuid4

from budgetbook.application.ports import ChangeAction, ChangeCollection, ChangeEvent
from budgetbook.infrastructure.messaging import InMemoryChangeFeed
from tests.shared.fixtures.factories import TestUserFactory


def _event(user_id, action=ChangeAction.CREATED) -> ChangeEvent:
    return ChangeEvent(
        user_id=user_id,
        collection=ChangeCollection.TRANSACTIONS,
        action=action,
        entity_id=uuid4(),
    )


class TestInMemoryChangeFeed:
    def test_listener_receives_own_events_only(self):
        feed = InMemoryChangeFeed()
        alice_events, bob_events = [], []
        feed.subscribe(TestUserFactory.ALICE_ID, alice_events.append)
        feed.subscribe(TestUserFactory.BOB_ID, bob_events.append)

        event = _event(TestUserFactory.ALICE_ID)
        feed.publish([event])

        assert alice_events == [event]
        assert bob_events == []

    def test_unsubscribe(self):
        feed = InMemoryChangeFeed()
        received = []
        unsubscribe = feed.subscribe(TestUserFactory.ALICE_ID, received.append)
        assert feed.subscriber_count(TestUserFactory.ALICE_ID) == 1

        unsubscribe()
        unsubscribe()
        feed.publish([_event(TestUserFactory.ALICE_ID)])

        assert received == []
        assert feed.subscriber_count(TestUserFactory.ALICE_ID) == 0

    def test_failing_listener_does_not_affect_others(self, caplog):
        feed = InMemoryChangeFeed()
        received = []

        def broken(event: ChangeEvent) -> None:
            raise RuntimeError("listener bug")

        feed.subscribe(TestUserFactory.ALICE_ID, broken)
        feed.subscribe(TestUserFactory.ALICE_ID, received.append)

        feed.publish([_event(TestUserFactory.ALICE_ID)])

        assert len(received) == 1
        assert "Change listener failed" in caplog.text

    def test_event_serialization(self):
        event = _event(TestUserFactory.ALICE_ID, ChangeAction.DELETED)

        payload = event.to_dict()

        assert payload["collection"] == "transactions"
        assert payload["action"] == "deleted"
        assert payload["id"] == str(event.entity_id)
        assert "user_id" not in payload
