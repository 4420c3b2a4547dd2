"""Root conftest - shared test configuration and in-memory database.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - fake_db_manager is a real DatabaseSessionManager bound to that database,
      so units of work, rollback and error mapping run unmodified

Design Decisions:
    - StaticPool: every session shares the single in-memory connection
      (a second connection would see an empty database)
    - SQLite renders FOR UPDATE as nothing; row locking is only exercised
      against PostgreSQL
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

# Ensure tests never reach a real database or auth service
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH_SERVICE_URL", "http://auth.test")

from minigame.db.base import Base  # noqa: E402
from minigame.infrastructure.database import DatabaseSessionManager  # noqa: E402
import minigame.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def fake_db_manager(test_engine, test_session_factory):
    """DatabaseSessionManager wired to the test engine without building a pool."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


class FakeRandom:
    """Deterministic randint: returns queued values, 0 once the queue is empty.

    Records every (a, b) range it was asked for.
    """

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        value = self.values.pop(0) if self.values else 0
        assert a <= value <= b, f"{value} outside [{a}, {b}]"
        return value


@pytest.fixture
def fake_random():
    return FakeRandom()
