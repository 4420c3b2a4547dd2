"""AuthGate Client - resolves an API key to a user through the external auth service.

Invariants:
    - API_KEY_NONEXISTENT / API_KEY_UNAUTHORIZED -> UnauthorizedError (not logged as errors)
    - INTERNAL_SERVER_ERROR / METHOD_NOT_ALLOWED / BAD_REQUEST / NETWORK -> AuthServiceError
    - Any other failure kind -> UnknownUpstreamError
    - Transport failures (connect, timeout, ...) count as NETWORK
    - No retries: an auth failure is terminal for the request

Design Decisions:
    - Wrapper over raw httpx.AsyncClient: error mapping lives in one place
    - transport parameter lets tests plug in httpx.MockTransport
"""

import logging

import httpx
from pydantic import ValidationError

from minigame.core.errors import (
    AuthServiceError,
    MinigameError,
    UnauthorizedError,
    UnknownUpstreamError,
)
from minigame.schemas.auth import AuthenticatedUser

logger = logging.getLogger(__name__)

UNAUTHORIZED_KINDS = frozenset({"API_KEY_NONEXISTENT", "API_KEY_UNAUTHORIZED"})
INTERNAL_KINDS = frozenset({
    "INTERNAL_SERVER_ERROR", "METHOD_NOT_ALLOWED", "BAD_REQUEST", "NETWORK",
})

GET_USER_PATH = "/get_user_by_api_key_if_valid"


def map_auth_error(kind: str) -> MinigameError:
    """Translate an auth-service failure kind into this service's error."""
    if kind in UNAUTHORIZED_KINDS:
        return UnauthorizedError()
    if kind in INTERNAL_KINDS:
        error: MinigameError = AuthServiceError(kind)
    else:
        error = UnknownUpstreamError(kind)
    logger.error(
        f"{error.code}: auth service: {kind}",
        extra={"error_code": error.code},
    )
    return error


def _failure_kind(response: httpx.Response) -> str:
    """Auth service answers failures with a JSON string such as "API_KEY_NONEXISTENT"."""
    try:
        body = response.json()
    except ValueError:
        return f"HTTP_{response.status_code}"
    if isinstance(body, str):
        return body
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"HTTP_{response.status_code}"


class AuthServiceClient:
    """Thin async client for the auth microservice."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout_seconds, transport=transport,
        )

    async def get_user_by_api_key_if_valid(self, api_key: str) -> AuthenticatedUser:
        """User owning `api_key`, or a mapped MinigameError."""
        if not api_key:
            raise UnauthorizedError()
        try:
            response = await self._client.post(
                GET_USER_PATH, json={"apiKey": api_key},
            )
        except httpx.TransportError as e:
            logger.warning(f"Auth service unreachable: {e}")
            raise map_auth_error("NETWORK") from e

        if response.is_success:
            try:
                return AuthenticatedUser.model_validate(response.json())
            except (ValueError, ValidationError) as e:
                raise map_auth_error("DECODE_ERROR") from e
        raise map_auth_error(_failure_kind(response))

    async def aclose(self) -> None:
        await self._client.aclose()


# Singleton (initialized on startup)
auth_client: AuthServiceClient | None = None


def init_auth_client(base_url: str, **kwargs) -> AuthServiceClient:
    global auth_client
    auth_client = AuthServiceClient(base_url, **kwargs)
    return auth_client


def get_auth_client() -> AuthServiceClient:
    """FastAPI dependency for the AuthGate."""
    if not auth_client:
        raise RuntimeError("Auth client not initialized")
    return auth_client
