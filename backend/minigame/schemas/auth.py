"""Auth Schemas - the identity the AuthGate returns for a valid API key."""

from minigame.schemas.tournament import CamelModel


class AuthenticatedUser(CamelModel):
    """User resolved from an API key. Only user_id is relied upon."""
    user_id: int
    creation_time: int | None = None
