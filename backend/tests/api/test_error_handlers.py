"""Error Handlers - tests for the JSON error envelope.

Tests cover:
    - MinigameError keeps its code, status and tournament context
    - unexpected exceptions become INTERNAL_ERROR without leaking the message
"""

import json

from starlette.requests import Request

from minigame.api.error_handlers import minigame_error_handler, unhandled_error_handler
from minigame.core.errors import TournamentStartedError


def _request(path="/public/tournament_membership/new") -> Request:
    return Request({
        "type": "http", "method": "POST", "path": path,
        "headers": [], "query_string": b"",
    })


async def test_minigame_error_envelope():
    res = await minigame_error_handler(_request(), TournamentStartedError(9, 2))
    body = json.loads(res.body)
    assert res.status_code == 409
    assert body["error"]["code"] == "TOURNAMENT_STARTED"
    assert body["error"]["category"] == "business_rule"
    assert body["error"]["context"]["tournament_id"] == 9


async def test_unhandled_error_hides_details():
    res = await unhandled_error_handler(_request(), RuntimeError("db password is hunter2"))
    body = json.loads(res.body)
    assert res.status_code == 500
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "hunter2" not in res.body.decode()
