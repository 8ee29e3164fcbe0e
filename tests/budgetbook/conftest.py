"""
Pytest configuration for budgetbook tests.

Provides user contexts and an in-memory ledger so application tests run
without a database.
"""

import pytest

from budgetbook.application.context import UserContext
from budgetbook.infrastructure.messaging import InMemoryChangeFeed
from tests.shared.fixtures.factories import TestUserFactory
from tests.shared.fixtures.memory import (
    InMemoryLedgerFactory,
    InMemoryLedgerStore,
)


@pytest.fixture
def user_context() -> UserContext:
    """UserContext for the default test user."""
    return TestUserFactory.default_context()


@pytest.fixture
def alice_context() -> UserContext:
    return TestUserFactory.alice_context()


@pytest.fixture
def bob_context() -> UserContext:
    return TestUserFactory.bob_context()


@pytest.fixture
def change_feed() -> InMemoryChangeFeed:
    return InMemoryChangeFeed()


@pytest.fixture
def memory_store() -> InMemoryLedgerStore:
    return InMemoryLedgerStore()


@pytest.fixture
def ledger_factory(memory_store, user_context, change_feed) -> InMemoryLedgerFactory:
    """In-memory ledger for the default test user."""
    return InMemoryLedgerFactory(memory_store, user_context, change_feed)
