"""Route Dependencies - per-request coordinator construction.

Invariants:
    - One coordinator per request, sharing the process-wide session manager and locks
"""

from fastapi import Depends

from minigame.infrastructure.database import DatabaseSessionManager, get_db_manager
from minigame.services.lifecycle_coordinator import TournamentLifecycleCoordinator


def get_coordinator(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> TournamentLifecycleCoordinator:
    return TournamentLifecycleCoordinator(db_manager)
