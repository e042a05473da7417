"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for author values, mocked database
sessions and an in-memory SQLite database.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Point the module-level engine at SQLite before importing app modules
os.environ.setdefault("DB_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from author_profile.models.author import Author  # noqa: E402
from author_profile.storage.db import create_tables  # noqa: E402

from tests.mocks.author_data import make_author_values  # noqa: E402


@pytest.fixture
def author_values():
    """
    Provides the six constructor arguments of a valid author.

    Returns:
        dict: Keyword arguments for Author
    """
    return make_author_values()


@pytest.fixture
def author(author_values):
    """
    Provides a valid Author instance.

    Args:
        author_values: Fixture providing constructor arguments

    Returns:
        Author: Valid author
    """
    return Author(**author_values)


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest_asyncio.fixture
async def sqlite_session():
    """
    Provides a session on a fresh in-memory SQLite database with the
    author table created.

    Yields:
        AsyncSession: Session bound to the in-memory database
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool
    )
    await create_tables(engine)
    session_factory = async_sessionmaker(
        engine, expire_on_commit=False, class_=AsyncSession
    )
    async with session_factory() as session:
        yield session
    await engine.dispose()
