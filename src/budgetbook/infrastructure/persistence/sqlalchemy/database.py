"""Engine and session factory construction."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

# Import models to register with Base.metadata
from budgetbook.infrastructure.persistence.sqlalchemy.models import Base

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(url: str) -> None:
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        if db_path:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def create_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for ``url``.

    SQLite files get one connection per session (``NullPool``) and a busy
    timeout so concurrent writers wait for the lock instead of failing at
    once. Other backends use the default pool with pre-ping.
    """
    if url.startswith("sqlite"):
        _ensure_sqlite_directory(url)
        return create_async_engine(
            url,
            echo=echo,
            poolclass=NullPool,
            connect_args={"timeout": 5},
        )

    return create_async_engine(url, echo=echo, pool_pre_ping=True)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is up to date")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all database tables (USE WITH CAUTION!)."""
    logger.warning("Dropping all database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database tables dropped successfully")
