"""Messaging adapters."""

from budgetbook.infrastructure.messaging.in_memory_change_feed import (
    InMemoryChangeFeed,
)

__all__ = ["InMemoryChangeFeed"]
