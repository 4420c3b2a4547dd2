"""Tournament Views - filtered reads over every append-only entity.

Invariants:
    - Read-only; no API key required
    - Results ordered by identifier ascending, each embedding its Tournament
"""

from fastapi import APIRouter, Depends

from minigame.api.dependencies import get_coordinator
from minigame.schemas.tournament import (
    TournamentDataResponse,
    TournamentDataViewProps,
    TournamentMembershipResponse,
    TournamentMembershipViewProps,
    TournamentSubmissionResponse,
    TournamentSubmissionViewProps,
    TournamentYearDemandResponse,
    TournamentYearDemandViewProps,
    TournamentYearResponse,
    TournamentYearViewProps,
)
from minigame.services.lifecycle_coordinator import TournamentLifecycleCoordinator

router = APIRouter(prefix="/public", tags=["tournament-views"])


@router.post(
    "/tournament_data/view", response_model=list[TournamentDataResponse],
)
async def tournament_data_view(
    props: TournamentDataViewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
):
    return await coordinator.view_tournament_data(props.to_record_filter())


@router.post(
    "/tournament_membership/view",
    response_model=list[TournamentMembershipResponse],
)
async def tournament_membership_view(
    props: TournamentMembershipViewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
):
    return await coordinator.view_tournament_membership(props.to_record_filter())


@router.post(
    "/tournament_submission/view",
    response_model=list[TournamentSubmissionResponse],
)
async def tournament_submission_view(
    props: TournamentSubmissionViewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
):
    return await coordinator.view_tournament_submission(props.to_record_filter())


@router.post(
    "/tournament_year/view", response_model=list[TournamentYearResponse],
)
async def tournament_year_view(
    props: TournamentYearViewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
):
    return await coordinator.view_tournament_year(props.to_record_filter())


@router.post(
    "/tournament_year_demand/view",
    response_model=list[TournamentYearDemandResponse],
)
async def tournament_year_demand_view(
    props: TournamentYearDemandViewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
):
    return await coordinator.view_tournament_year_demand(props.to_record_filter())
