"""Tournament Mutations - create, revise, advance, join, submit.

Invariants:
    - Every endpoint authenticates the body's apiKey before touching the coordinator
    - Bodies and responses are camelCase JSON (schemas/tournament.py)
    - Business errors propagate as MinigameError to the global handler
"""

import logging

from fastapi import APIRouter, Depends

from minigame.api.dependencies import get_coordinator
from minigame.infrastructure.auth_client import AuthServiceClient, get_auth_client
from minigame.schemas.tournament import (
    TournamentDataNewProps,
    TournamentDataResponse,
    TournamentMembershipNewProps,
    TournamentMembershipResponse,
    TournamentNewProps,
    TournamentSubmissionNewProps,
    TournamentSubmissionResponse,
    TournamentYearNewProps,
    TournamentYearResponse,
)
from minigame.services.lifecycle_coordinator import TournamentLifecycleCoordinator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/public", tags=["tournaments"])


@router.post("/tournament/new", response_model=TournamentDataResponse)
async def tournament_new(
    props: TournamentNewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
    auth: AuthServiceClient = Depends(get_auth_client),
):
    """Create a tournament; the caller becomes its creator."""
    user = await auth.get_user_by_api_key_if_valid(props.api_key)
    return await coordinator.create_tournament(
        user.user_id,
        props.title,
        max_rounds=props.max_rounds,
        incentive_start_round=props.incentive_start_round,
        baseline_demand=props.baseline_demand,
        incentive_magnitude=props.incentive_magnitude,
    )


@router.post("/tournament_data/new", response_model=TournamentDataResponse)
async def tournament_data_new(
    props: TournamentDataNewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
    auth: AuthServiceClient = Depends(get_auth_client),
):
    """Edit title or archive/restore (creator only)."""
    user = await auth.get_user_by_api_key_if_valid(props.api_key)
    return await coordinator.revise_tournament_data(
        user.user_id, props.tournament_id, props.title, props.active,
    )


@router.post("/tournament_year/new", response_model=TournamentYearResponse)
async def tournament_year_new(
    props: TournamentYearNewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
    auth: AuthServiceClient = Depends(get_auth_client),
):
    """Advance to the next round (creator only)."""
    user = await auth.get_user_by_api_key_if_valid(props.api_key)
    return await coordinator.advance_year(user.user_id, props.tournament_id)


@router.post(
    "/tournament_membership/new", response_model=TournamentMembershipResponse,
)
async def tournament_membership_new(
    props: TournamentMembershipNewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
    auth: AuthServiceClient = Depends(get_auth_client),
):
    """Join a tournament that has not started."""
    user = await auth.get_user_by_api_key_if_valid(props.api_key)
    return await coordinator.join_tournament(
        user.user_id, props.tournament_id, props.active,
    )


@router.post(
    "/tournament_submission/new", response_model=TournamentSubmissionResponse,
)
async def tournament_submission_new(
    props: TournamentSubmissionNewProps,
    coordinator: TournamentLifecycleCoordinator = Depends(get_coordinator),
    auth: AuthServiceClient = Depends(get_auth_client),
):
    """Submit a value for the current round (active members only)."""
    user = await auth.get_user_by_api_key_if_valid(props.api_key)
    return await coordinator.submit_value(
        user.user_id, props.tournament_id, props.amount,
    )
