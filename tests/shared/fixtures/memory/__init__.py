"""Versioned in-memory ledger store used by the unit tests."""

from tests.shared.fixtures.memory.factory import InMemoryLedgerFactory
from tests.shared.fixtures.memory.store import InMemoryLedgerStore
from tests.shared.fixtures.memory.unit_of_work import (
    InMemoryUnitOfWork,
)

__all__ = ["InMemoryLedgerFactory", "InMemoryLedgerStore", "InMemoryUnitOfWork"]
