"""Record Protocols - structural contracts for the rows the lifecycle rules inspect.

Invariants:
    - Core NEVER imports ORM models; rules read these attributes only
    - Every record carries creator_user_id (the acting user)

Design Decisions:
    - Protocol over ABC: ORM rows and plain test doubles both satisfy it
"""

from typing import Protocol


class TournamentLike(Protocol):
    """Immutable creation-time parameters."""
    tournament_id: int
    creator_user_id: int
    max_rounds: int
    incentive_start_round: int
    baseline_demand: int
    incentive_magnitude: int


class TournamentDataLike(Protocol):
    tournament_id: int
    title: str
    active: bool


class TournamentYearLike(Protocol):
    tournament_id: int
    current_round: int


class MembershipLike(Protocol):
    """One version of a (tournament, user) membership."""
    tournament_membership_id: int
    creator_user_id: int
    active: bool


class SubmissionLike(Protocol):
    creator_user_id: int
    round: int
    autogenerated: bool
