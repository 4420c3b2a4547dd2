"""Database Session Manager - async engine, sessions that roll back, startup readiness wait.

Invariants:
    - Closing a session discards whatever it did not commit
    - Every SQLAlchemyError leaves a session as DatabaseError (core/errors.py)
    - wait_until_ready() retries forever with a fixed delay and logs each failure

Design Decisions:
    - Module singleton db_manager set by the lifespan; routes reach it through
      get_db_manager() so tests can swap it
    - expire_on_commit=False: rows stay readable after the unit of work commits
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from minigame.core.errors import DatabaseError

logger = logging.getLogger(__name__)

# Most specific first; SQLAlchemyError catches the rest
_ERROR_KINDS: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    for kind, message, operation in _ERROR_KINDS:
        if isinstance(exc, kind):
            return DatabaseError(message, operation)
    raise TypeError(f"not a SQLAlchemy error: {exc!r}")


class DatabaseSessionManager:
    """Owns the engine and hands out sessions for units of work."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_options = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_options.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_options)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            error = to_database_error(e)
            logger.error(
                f"{error.message}: {e}",
                extra={"error_code": error.code, "operation": error.operation},
            )
            raise error from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when a trivial query succeeds."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return False
        return True

    async def wait_until_ready(
        self,
        retry_seconds: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> int:
        """Block until the database answers. Returns the number of failed attempts."""
        attempt = 0
        while not await self.health_check():
            attempt += 1
            logger.error(
                f"Database unavailable, retrying in {retry_seconds}s",
                extra={"attempt": attempt},
            )
            await sleep(retry_seconds)
        if attempt:
            logger.info("Database reachable", extra={"attempt": attempt + 1})
        return attempt

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    """FastAPI dependency for the session manager."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    return db_manager
