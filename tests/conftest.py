"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEBUG", "false")

from movie_catalog.database import Base, create_engine, create_session_factory
from movie_catalog.main import app
from movie_catalog.models import Actor, Genre, Movie


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _make_engine(tables=None) -> AsyncEngine:
    """Fresh in-memory SQLite database holding the given tables (default: all)."""
    test_engine = create_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, tables=tables)
    return test_engine


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory database with the full schema."""
    test_engine = await _make_engine()
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session on the full schema."""
    async with create_session_factory(db_engine)() as db_session:
        yield db_session


@pytest.fixture
async def unmigrated_session() -> AsyncGenerator[AsyncSession]:
    """Session on a database where movie_actor has not been created yet."""
    test_engine = await _make_engine(
        tables=[Genre.__table__, Movie.__table__, Actor.__table__],
    )
    async with create_session_factory(test_engine)() as db_session:
        yield db_session
    await test_engine.dispose()

