"""In-process change feed."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable
from uuid import UUID

from budgetbook.application.ports import (
    ChangeEvent,
    ChangeFeed,
    ChangeListener,
    Unsubscribe,
)

logger = logging.getLogger(__name__)


class InMemoryChangeFeed(ChangeFeed):
    """
    Callback registry keyed by user id.

    Listeners run synchronously in ``publish``; they should only hand the
    event off (e.g. ``queue.put_nowait``). A failing listener is logged and
    the remaining listeners still receive the event.
    """

    def __init__(self) -> None:
        self._listeners: dict[UUID, list[ChangeListener]] = defaultdict(list)

    def publish(self, events: Iterable[ChangeEvent]) -> None:
        for event in events:
            listeners = list(self._listeners.get(event.user_id, ()))
            logger.debug(
                "Publishing %s/%s %s to %d listener(s)",
                event.collection.value,
                event.entity_id,
                event.action.value,
                len(listeners),
            )
            for listener in listeners:
                try:
                    listener(event)
                except Exception:
                    logger.exception("Change listener failed for user %s", event.user_id)

    def subscribe(self, user_id: UUID, listener: ChangeListener) -> Unsubscribe:
        self._listeners[user_id].append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(user_id)
            if listeners and listener in listeners:
                listeners.remove(listener)
                if not listeners:
                    del self._listeners[user_id]

        return unsubscribe

    def subscriber_count(self, user_id: UUID) -> int:
        return len(self._listeners.get(user_id, ()))
