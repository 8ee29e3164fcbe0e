"""
SQLite fixtures for integration tests.

Each test gets its own database file under pytest's ``tmp_path`` so tests
never share state and never touch a developer database.

Usage:
    # In your conftest.py
    from tests.shared.fixtures.database import async_engine, session_maker

    async def test_something(session_maker):
        async with session_maker() as session:
            ...
"""

import pytest
import pytest_asyncio

from budgetbook.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
)


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'budgetbook-test.db'}"


@pytest_asyncio.fixture
async def async_engine(sqlite_url):
    """Engine with all tables created; disposed after the test."""
    engine = create_engine(sqlite_url)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(async_engine):
    return create_session_maker(async_engine)
