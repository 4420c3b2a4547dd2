"""Database Session Manager - tests for readiness wait and error mapping.

Tests cover:
    - wait_until_ready retries with the configured delay until the DB answers
    - wait_until_ready returns immediately when the DB is up
    - SQLAlchemy errors inside a session surface as DatabaseError
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError

from minigame.core.errors import DatabaseError
from minigame.infrastructure.database import DatabaseSessionManager, to_database_error


def _bare_manager() -> DatabaseSessionManager:
    return DatabaseSessionManager.__new__(DatabaseSessionManager)


async def test_wait_until_ready_retries_until_healthy():
    manager = _bare_manager()
    manager.health_check = AsyncMock(side_effect=[False, False, True])
    sleep = AsyncMock()

    attempts = await manager.wait_until_ready(5.0, sleep=sleep)

    assert attempts == 2
    assert manager.health_check.await_count == 3
    assert sleep.await_count == 2
    sleep.assert_awaited_with(5.0)


async def test_wait_until_ready_when_already_up():
    manager = _bare_manager()
    manager.health_check = AsyncMock(return_value=True)
    sleep = AsyncMock()

    assert await manager.wait_until_ready(5.0, sleep=sleep) == 0
    sleep.assert_not_awaited()


async def test_health_check_against_sqlite(fake_db_manager):
    assert await fake_db_manager.health_check() is True


async def test_operational_error_mapped(fake_db_manager):
    with pytest.raises(DatabaseError) as exc:
        async with fake_db_manager.session():
            raise OperationalError("SELECT 1", {}, Exception("gone"))
    assert exc.value.operation == "execute"
    assert exc.value.code == "INTERNAL_SERVER_ERROR"


async def test_bad_sql_mapped(fake_db_manager):
    with pytest.raises(DatabaseError):
        async with fake_db_manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))


def test_integrity_error_is_commit_failure():
    error = to_database_error(IntegrityError("INSERT", {}, Exception("dup")))
    assert error.operation == "commit"
    assert error.http_status == 500


def test_non_sqlalchemy_error_rejected():
    with pytest.raises(TypeError):
        to_database_error(ValueError("nope"))
