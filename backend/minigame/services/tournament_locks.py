"""Tournament Locks - per-tournament mutual exclusion inside one process.

Invariants:
    - Two operations holding the same tournament id never overlap
    - Operations on different tournaments never wait on each other
    - hold(None) is a no-op (used by operations that create a fresh tournament)

Design Decisions:
    - WeakValueDictionary: a lock lives only while some coroutine holds or awaits it
    - Cross-process exclusion comes from SELECT ... FOR UPDATE on the tournament row
"""

import asyncio
import weakref
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class TournamentLocks:
    """Registry of asyncio.Lock keyed by tournament id."""

    def __init__(self):
        self._locks: weakref.WeakValueDictionary[int, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def lock_for(self, tournament_id: int) -> asyncio.Lock:
        lock = self._locks.get(tournament_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[tournament_id] = lock
        return lock

    @asynccontextmanager
    async def hold(self, tournament_id: int | None) -> AsyncIterator[None]:
        if tournament_id is None:
            yield
            return
        lock = self.lock_for(tournament_id)
        async with lock:
            yield


# Process-wide registry shared by every request
tournament_locks = TournamentLocks()
