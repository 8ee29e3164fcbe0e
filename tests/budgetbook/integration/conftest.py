"""
Pytest configuration for budgetbook integration tests.

Integration tests run against a throwaway SQLite file per test.
Import the shared fixtures to make them available.
"""

import pytest

from budgetbook.infrastructure.persistence.sqlalchemy import SQLAlchemyLedgerFactory

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    session_maker,
    sqlite_url,
)

__all__ = [
    "async_engine",
    "session_maker",
    "sqlite_url",
]


@pytest.fixture
def sql_ledger_factory(session_maker, user_context, change_feed) -> SQLAlchemyLedgerFactory:
    """SQLite-backed ledger for the default test user."""
    return SQLAlchemyLedgerFactory(session_maker, user_context, change_feed)
