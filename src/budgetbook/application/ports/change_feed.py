"""Change feed port: push notifications about committed ledger changes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Iterable
from uuid import UUID

from budgetbook.domain.shared.time import utc_now


class ChangeCollection(str, Enum):
    ACCOUNTS = "accounts"
    TRANSACTIONS = "transactions"
    BUDGETS = "budgets"


class ChangeAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class ChangeEvent:
    """One committed change to a user's collection."""

    user_id: UUID
    collection: ChangeCollection
    action: ChangeAction
    entity_id: UUID
    occurred_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "collection": self.collection.value,
            "action": self.action.value,
            "id": str(self.entity_id),
            "occurred_at": self.occurred_at.isoformat(),
        }


ChangeListener = Callable[[ChangeEvent], None]
Unsubscribe = Callable[[], None]


class ChangeFeed(ABC):
    """
    Fan-out of change events to passive observers, per user.

    Publishers call ``publish`` only after a successful commit. Observers
    never see events of other users and cannot affect the publisher.
    """

    @abstractmethod
    def publish(self, events: Iterable[ChangeEvent]) -> None:
        """Deliver events to every listener of the events' users."""

    @abstractmethod
    def subscribe(self, user_id: UUID, listener: ChangeListener) -> Unsubscribe:
        """Register a listener; the returned callable removes it again."""

    @abstractmethod
    def subscriber_count(self, user_id: UUID) -> int:
        """Number of listeners currently registered for a user."""
