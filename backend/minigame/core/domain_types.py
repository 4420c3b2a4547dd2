"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - All lifecycle states encoded as Enums (no raw string matching)
    - A phase is derived from current_round; it is never stored

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


class TournamentPhase(str, Enum):
    """Derived lifecycle of one tournament, from its current round."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
