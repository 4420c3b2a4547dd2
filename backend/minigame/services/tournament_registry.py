"""Tournament Registry - typed read access to a tournament and its current state.

Invariants:
    - Read-only: never appends
    - Built entirely on VersionedEntityStore.current (no caching of "current")
    - A tournament missing its TournamentData/TournamentYear is reported as nonexistent
"""

from minigame.core.errors import TournamentNonexistentError
from minigame.models import Tournament, TournamentData, TournamentYear
from minigame.services.versioned_store import VersionedEntityStore


class TournamentRegistry:
    """Lookups by tournament id on top of a store bound to one transaction."""

    def __init__(self, store: VersionedEntityStore):
        self.store = store

    async def get_tournament(
        self, tournament_id: int, *, for_update: bool = False,
    ) -> Tournament | None:
        return await self.store.current(
            Tournament, (tournament_id,), for_update=for_update,
        )

    async def require_tournament(
        self, tournament_id: int, *, for_update: bool = False,
    ) -> Tournament:
        """Tournament or TournamentNonexistentError.

        for_update row-locks the tournament on PostgreSQL, which serializes
        every mutating operation on it across processes.
        """
        tournament = await self.get_tournament(tournament_id, for_update=for_update)
        if tournament is None:
            raise TournamentNonexistentError(tournament_id)
        return tournament

    async def current_data(self, tournament_id: int) -> TournamentData:
        data = await self.store.current(TournamentData, (tournament_id,))
        if data is None:
            raise TournamentNonexistentError(tournament_id)
        return data

    async def current_year(self, tournament_id: int) -> TournamentYear:
        year = await self.store.current(TournamentYear, (tournament_id,))
        if year is None:
            raise TournamentNonexistentError(tournament_id)
        return year
