"""Error Hierarchy - typed, categorized exceptions for every tournament failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Business errors (400-level) are raised before any append
    - Ownership failures reuse TournamentNonexistentError so existence never leaks
    - to_response() produces the REST envelope; no internal details in messages

Design Decisions:
    - Single hierarchy with MinigameError base: one FastAPI handler catches all
    - Codes are SCREAMING_SNAKE_CASE strings, stable across releases (clients switch on them)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tournament_id: int | None = None
    user_id: int | None = None
    round_number: int | None = None
    debug_info: dict[str, Any] | None = None


class MinigameError(Exception):
    """Base exception for all minigame errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "tournament_id": self.context.tournament_id,
                    "round_number": self.context.round_number,
                },
            }
        }


# ─── Validation Errors (400) ─────────────────────────────────────

class TournamentMaxRoundsInvalidError(MinigameError):
    """max_rounds must be greater than 1."""
    def __init__(self, max_rounds: int, context: ErrorContext | None = None):
        super().__init__(
            f"max_rounds must be greater than 1 (got {max_rounds})",
            "TOURNAMENT_MAX_ROUNDS_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.max_rounds = max_rounds


class TournamentIncentiveStartRoundInvalidError(MinigameError):
    """incentive_start_round must lie strictly between 1 and max_rounds."""
    def __init__(
        self, incentive_start_round: int, max_rounds: int,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"incentive_start_round must satisfy 1 < start < {max_rounds} "
            f"(got {incentive_start_round})",
            "TOURNAMENT_INCENTIVE_START_ROUND_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.incentive_start_round = incentive_start_round


# ─── Resource / Authorization Errors ─────────────────────────────

class TournamentNonexistentError(MinigameError):
    """Tournament missing, or not owned by the caller."""
    def __init__(self, tournament_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.tournament_id = tournament_id
        super().__init__(
            f"Tournament {tournament_id} not found",
            "TOURNAMENT_NONEXISTENT", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class UnauthorizedError(MinigameError):
    """Missing/invalid API key, or a non-member acting as a member."""
    def __init__(
        self, message: str = "Unauthorized", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Business Rule Errors (409) ──────────────────────────────────

class TournamentArchivedError(MinigameError):
    """Current TournamentData has active=false."""
    def __init__(self, tournament_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.tournament_id = tournament_id
        super().__init__(
            f"Tournament {tournament_id} is archived",
            "TOURNAMENT_ARCHIVED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )


class TournamentStartedError(MinigameError):
    """Membership requested after round 0."""
    def __init__(
        self, tournament_id: int, current_round: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.tournament_id = tournament_id
        ctx.round_number = current_round
        super().__init__(
            f"Tournament {tournament_id} already started (round {current_round})",
            "TOURNAMENT_STARTED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )


class TournamentMembershipInvalidError(MinigameError):
    """The creator tried to join their own tournament."""
    def __init__(self, tournament_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.tournament_id = tournament_id
        super().__init__(
            "A tournament's creator cannot join it as a member",
            "TOURNAMENT_MEMBERSHIP_INVALID", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )


class TournamentMaxRoundsAchievedError(MinigameError):
    """Advance requested on a completed tournament."""
    def __init__(
        self, tournament_id: int, max_rounds: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.tournament_id = tournament_id
        ctx.round_number = max_rounds
        super().__init__(
            f"Tournament {tournament_id} already reached its last round ({max_rounds})",
            "TOURNAMENT_MAX_ROUNDS_ACHIEVED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MinigameError):
    """Storage-layer failure; the enclosing transaction was rolled back."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "INTERNAL_SERVER_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class AuthServiceError(MinigameError):
    """AuthGate reported its own internal failure (or was unreachable)."""
    def __init__(self, upstream_kind: str, context: ErrorContext | None = None):
        super().__init__(
            f"Auth service error ({upstream_kind})",
            "INTERNAL_SERVER_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.upstream_kind = upstream_kind


class UnknownUpstreamError(MinigameError):
    """AuthGate returned a failure kind this service does not map."""
    def __init__(self, upstream_kind: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown upstream error ({upstream_kind})",
            "UNKNOWN", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.upstream_kind = upstream_kind
