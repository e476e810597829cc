"""
Game Reviews Backend — Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for query-layer unit tests
    ├── db_engine:       fresh sqlite+aiosqlite database, tables created
    │                    and seeded from seed_data.py
    ├── db_session:      a session on that database for direct checks
    └── client:          httpx AsyncClient on the app, with get_db_session
                         overridden to use db_engine
"""

import os

# Must be set before anything imports app.config
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_game_reviews.db"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base, get_db_session
from app.main import app
from app.models import Category, Comment, Review, User
from seed_data import CATEGORIES, COMMENTS, REVIEWS, USERS


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless this is on for the connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_review(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = None
            with pytest.raises(NotFoundError):
                await review_service.get_review(mock_db_session, 100)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """A seeded throwaway database, one file per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'games.db'}")
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all([Category(**row) for row in CATEGORIES])
        session.add_all([User(**row) for row in USERS])
        await session.flush()
        session.add_all([Review(**row) for row in REVIEWS])
        await session.flush()
        session.add_all([Comment(**row) for row in COMMENTS])
        await session.commit()

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_engine) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient wired straight into the ASGI app.

    The override mirrors get_db_session (commit on success, rollback on
    error) against the test database.
    """
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    # raise_app_exceptions=False: the catch-all 500 handler re-raises after
    # responding, and the tests want to see that response
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
