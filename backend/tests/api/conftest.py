"""API test fixtures - FastAPI client over the in-memory database and a mocked AuthGate.

Invariants:
    - db_manager and auth_client singletons are patched, then restored
    - API key "key-<n>" authenticates as user n; "down" simulates an AuthGate
      outage; anything else is API_KEY_NONEXISTENT

Design Decisions:
    - ASGITransport does not run the lifespan: no readiness wait, no real pool
    - The real AuthServiceClient runs over httpx.MockTransport so the error
      mapping is exercised end to end
"""

import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

import minigame.infrastructure.auth_client as auth_module
import minigame.infrastructure.database as db_module
from minigame.infrastructure.auth_client import AuthServiceClient
from minigame.main import app


def _auth_handler(request: httpx.Request) -> httpx.Response:
    api_key = json.loads(request.content)["apiKey"]
    if api_key.startswith("key-"):
        return httpx.Response(
            200, json={"userId": int(api_key[4:]), "creationTime": 0},
        )
    if api_key == "down":
        return httpx.Response(500, json="INTERNAL_SERVER_ERROR")
    return httpx.Response(400, json="API_KEY_NONEXISTENT")


@pytest.fixture
async def client(fake_db_manager):
    original_manager = db_module.db_manager
    original_auth = auth_module.auth_client
    db_module.db_manager = fake_db_manager
    auth_module.auth_client = AuthServiceClient(
        "http://auth.test", transport=httpx.MockTransport(_auth_handler),
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    await auth_module.auth_client.aclose()
    db_module.db_manager = original_manager
    auth_module.auth_client = original_auth
