"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    async_engine,
    session_maker,
    sqlite_url,
)
from tests.shared.fixtures.factories import (
    TestAccountFactory,
    TestTransactionFactory,
    TestUserFactory,
)

__all__ = [
    "TestAccountFactory",
    "TestTransactionFactory",
    "TestUserFactory",
    "async_engine",
    "session_maker",
    "sqlite_url",
]
