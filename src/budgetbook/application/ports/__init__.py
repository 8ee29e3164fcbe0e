"""Ports the application layer depends on."""

from budgetbook.application.ports.change_feed import (
    ChangeAction,
    ChangeCollection,
    ChangeEvent,
    ChangeFeed,
    ChangeListener,
    Unsubscribe,
)
from budgetbook.application.ports.unit_of_work import LedgerUnitOfWork

__all__ = [
    "ChangeAction",
    "ChangeCollection",
    "ChangeEvent",
    "ChangeFeed",
    "ChangeListener",
    "LedgerUnitOfWork",
    "Unsubscribe",
]
