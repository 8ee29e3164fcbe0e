"""Root pytest configuration.

Test Structure:
    tests/
    ├── budgetbook/            # Ledger, users, API and CLI
    │   ├── unit/              # Fast, isolated tests (in-memory store, mocks)
    │   └── integration/       # SQLite database, HTTP app and CLI
    ├── budgetbook_auth/       # Password hashing and JWT primitives
    └── shared/                # Shared fixtures and utilities

Integration tests run against a temporary SQLite file per test; no external
services are needed.
"""

import pytest

from budgetbook_config.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Never leak cached settings between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()
