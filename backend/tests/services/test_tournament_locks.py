"""Tournament Locks - tests for per-tournament mutual exclusion.

Tests cover:
    - same tournament: critical sections never overlap
    - different tournaments: no waiting on each other
    - hold(None) does not lock
"""

import asyncio

from minigame.services.tournament_locks import TournamentLocks


async def test_same_tournament_serialized():
    locks = TournamentLocks()
    log = []

    async def work(name):
        async with locks.hold(7):
            log.append(f"{name}-in")
            await asyncio.sleep(0)
            log.append(f"{name}-out")

    await asyncio.gather(work("a"), work("b"))
    assert log == ["a-in", "a-out", "b-in", "b-out"]


async def test_different_tournaments_interleave():
    locks = TournamentLocks()
    log = []

    async def work(tournament_id):
        async with locks.hold(tournament_id):
            log.append(f"{tournament_id}-in")
            await asyncio.sleep(0)
            log.append(f"{tournament_id}-out")

    await asyncio.gather(work(1), work(2))
    assert log == ["1-in", "2-in", "1-out", "2-out"]


async def test_hold_none_is_noop():
    locks = TournamentLocks()
    async with locks.hold(None):
        async with locks.hold(None):
            pass


def test_lock_reused_while_referenced():
    locks = TournamentLocks()
    lock = locks.lock_for(3)
    assert locks.lock_for(3) is lock
    assert locks.lock_for(4) is not lock
