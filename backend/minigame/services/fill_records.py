"""Record Filling - hydrates append-only rows into API responses with their Tournament.

Invariants:
    - Every response embeds the Tournament referenced by the row's tournament_id
    - A row whose tournament is missing raises TournamentNonexistentError
    - Tournaments are immutable, so one filler may reuse a loaded Tournament

Design Decisions:
    - One RecordFiller per unit of work: the tournament cache dies with the transaction
"""

from minigame.models import (
    TournamentData,
    TournamentMembership,
    TournamentSubmission,
    TournamentYear,
    TournamentYearDemand,
)
from minigame.schemas.tournament import (
    TournamentDataResponse,
    TournamentMembershipResponse,
    TournamentResponse,
    TournamentSubmissionResponse,
    TournamentYearDemandResponse,
    TournamentYearResponse,
)
from minigame.services.tournament_registry import TournamentRegistry


class RecordFiller:
    """Turns ORM rows into filled response models."""

    def __init__(self, registry: TournamentRegistry):
        self._registry = registry
        self._tournaments: dict[int, TournamentResponse] = {}

    async def tournament(self, tournament_id: int) -> TournamentResponse:
        filled = self._tournaments.get(tournament_id)
        if filled is None:
            tournament = await self._registry.require_tournament(tournament_id)
            filled = TournamentResponse.model_validate(tournament)
            self._tournaments[tournament_id] = filled
        return filled

    async def tournament_data(self, row: TournamentData) -> TournamentDataResponse:
        return TournamentDataResponse(
            tournament_data_id=row.tournament_data_id,
            creation_time=row.creation_time,
            creator_user_id=row.creator_user_id,
            tournament=await self.tournament(row.tournament_id),
            title=row.title,
            active=row.active,
        )

    async def tournament_year(self, row: TournamentYear) -> TournamentYearResponse:
        return TournamentYearResponse(
            tournament_year_id=row.tournament_year_id,
            creation_time=row.creation_time,
            creator_user_id=row.creator_user_id,
            tournament=await self.tournament(row.tournament_id),
            current_round=row.current_round,
        )

    async def tournament_membership(
        self, row: TournamentMembership,
    ) -> TournamentMembershipResponse:
        return TournamentMembershipResponse(
            tournament_membership_id=row.tournament_membership_id,
            creation_time=row.creation_time,
            creator_user_id=row.creator_user_id,
            tournament=await self.tournament(row.tournament_id),
            active=row.active,
        )

    async def tournament_submission(
        self, row: TournamentSubmission,
    ) -> TournamentSubmissionResponse:
        return TournamentSubmissionResponse(
            tournament_submission_id=row.tournament_submission_id,
            creation_time=row.creation_time,
            creator_user_id=row.creator_user_id,
            tournament=await self.tournament(row.tournament_id),
            round=row.round,
            amount=row.amount,
            autogenerated=row.autogenerated,
        )

    async def tournament_year_demand(
        self, row: TournamentYearDemand,
    ) -> TournamentYearDemandResponse:
        return TournamentYearDemandResponse(
            tournament_year_demand_id=row.tournament_year_demand_id,
            creation_time=row.creation_time,
            creator_user_id=row.creator_user_id,
            user_id=row.user_id,
            tournament=await self.tournament(row.tournament_id),
            round=row.round,
            demand=row.demand,
        )
