"""Lifecycle Enforcement - pure business rules for tournament transitions.

Invariants:
    - Every check is PURE: reads records, raises a typed error, never mutates
    - Check order inside one operation is fixed: existence/ownership first,
      then creator-join, then archive, then round
    - "Current" membership is the highest tournament_membership_id per user

Design Decisions:
    - Checks raise instead of returning descriptors: the coordinator runs them
      inside a transaction and an exception is what rolls it back
"""

from collections.abc import Iterable

from minigame.core.domain_types import TournamentPhase
from minigame.core.errors import (
    TournamentArchivedError,
    TournamentIncentiveStartRoundInvalidError,
    TournamentMaxRoundsAchievedError,
    TournamentMaxRoundsInvalidError,
    TournamentMembershipInvalidError,
    TournamentNonexistentError,
    TournamentStartedError,
    UnauthorizedError,
)
from minigame.core.record_protocols import (
    MembershipLike,
    SubmissionLike,
    TournamentDataLike,
    TournamentLike,
    TournamentYearLike,
)


def validate_tournament_params(max_rounds: int, incentive_start_round: int) -> None:
    """Creation-time parameter validation."""
    if max_rounds <= 1:
        raise TournamentMaxRoundsInvalidError(max_rounds)
    if not 1 < incentive_start_round < max_rounds:
        raise TournamentIncentiveStartRoundInvalidError(
            incentive_start_round, max_rounds,
        )


def tournament_phase(current_round: int, max_rounds: int) -> TournamentPhase:
    if current_round == 0:
        return TournamentPhase.NOT_STARTED
    if current_round >= max_rounds:
        return TournamentPhase.COMPLETED
    return TournamentPhase.IN_PROGRESS


def check_owner(tournament: TournamentLike, user_id: int) -> None:
    """Non-owners get the same error as a missing tournament."""
    if tournament.creator_user_id != user_id:
        raise TournamentNonexistentError(tournament.tournament_id)


def check_not_archived(data: TournamentDataLike) -> None:
    if not data.active:
        raise TournamentArchivedError(data.tournament_id)


def check_can_advance(
    tournament: TournamentLike,
    data: TournamentDataLike,
    year: TournamentYearLike,
) -> None:
    """Owner already verified; tournament must be active and not completed."""
    check_not_archived(data)
    phase = tournament_phase(year.current_round, tournament.max_rounds)
    if phase is TournamentPhase.COMPLETED:
        raise TournamentMaxRoundsAchievedError(
            tournament.tournament_id, tournament.max_rounds,
        )


def check_can_join(
    tournament: TournamentLike,
    user_id: int,
    data: TournamentDataLike,
    year: TournamentYearLike,
) -> None:
    """Creator never joins; tournament must be active and still at round 0."""
    if tournament.creator_user_id == user_id:
        raise TournamentMembershipInvalidError(tournament.tournament_id)
    check_not_archived(data)
    if year.current_round != 0:
        raise TournamentStartedError(tournament.tournament_id, year.current_round)


def check_can_submit(
    membership: MembershipLike | None,
    data: TournamentDataLike,
) -> None:
    """Only a currently active member may submit to an active tournament."""
    if membership is None or not membership.active:
        raise UnauthorizedError("User is not an active member of this tournament")
    check_not_archived(data)


def latest_memberships(
    memberships: Iterable[MembershipLike],
) -> dict[int, MembershipLike]:
    """Latest version per user, keyed by user id."""
    latest: dict[int, MembershipLike] = {}
    for membership in memberships:
        held = latest.get(membership.creator_user_id)
        if held is None or membership.tournament_membership_id > held.tournament_membership_id:
            latest[membership.creator_user_id] = membership
    return latest


def active_member_ids(memberships: Iterable[MembershipLike]) -> list[int]:
    """Users whose latest membership is active, ascending."""
    return sorted(
        user_id
        for user_id, membership in latest_memberships(memberships).items()
        if membership.active
    )


def missing_submitters(
    member_ids: Iterable[int],
    submissions: Iterable[SubmissionLike],
    round_number: int,
) -> list[int]:
    """Members with no submission (manual or autogenerated) for round_number."""
    submitted = {
        s.creator_user_id for s in submissions if s.round == round_number
    }
    return [user_id for user_id in member_ids if user_id not in submitted]
