"""Service test fixtures - coordinator bound to the in-memory database.

Invariants:
    - coordinator uses a private TournamentLocks so tests never share lock state
    - fake_random drives every incentive draw (empty queue -> 0)
"""

import pytest

from minigame.services.lifecycle_coordinator import TournamentLifecycleCoordinator
from minigame.services.tournament_locks import TournamentLocks

CREATOR = 1


@pytest.fixture
def coordinator(fake_db_manager, fake_random):
    return TournamentLifecycleCoordinator(
        fake_db_manager, locks=TournamentLocks(), rng=fake_random,
    )


@pytest.fixture
async def tournament_id(coordinator):
    """Tournament with 5 rounds, incentives from round 3, created by CREATOR."""
    data = await coordinator.create_tournament(
        CREATOR, "Spring Cup", max_rounds=5, incentive_start_round=3,
    )
    return data.tournament.tournament_id
