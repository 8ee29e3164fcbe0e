"""Helpers for announcing committed changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional
from uuid import UUID

from budgetbook.application.ports import ChangeAction, ChangeCollection, ChangeEvent

if TYPE_CHECKING:
    from budgetbook.application.ports import ChangeFeed


def publish_changes(
    feed: Optional[ChangeFeed],
    user_id: UUID,
    collection: ChangeCollection,
    action: ChangeAction,
    entity_ids: Iterable[UUID],
) -> None:
    """Publish one event per id; a missing feed is a no-op."""
    if feed is None:
        return
    events = [
        ChangeEvent(
            user_id=user_id,
            collection=collection,
            action=action,
            entity_id=entity_id,
        )
        for entity_id in entity_ids
    ]
    if events:
        feed.publish(events)
