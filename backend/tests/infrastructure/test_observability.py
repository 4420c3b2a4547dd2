"""Structured Logging & Settings - tests for formatters, setup and env-driven config.

Tests cover:
    - JSONFormatter emits core fields plus tournament extras when present
    - TextFormatter appends extras as key=value
    - setup_logging replaces its own handler instead of stacking
    - postgresql:// URLs are rewritten for asyncpg; out-of-range settings rejected
"""

import json
import logging

import pytest
from pydantic import ValidationError

from minigame.config import Settings
from minigame.infrastructure.observability import (
    JSONFormatter,
    TextFormatter,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "minigame.test", logging.INFO, __file__, 1, "advanced", None, None,
    )
    record.__dict__.update(extra)
    return record


# ─── formatters ──────────────────────────────────────────────────

def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "minigame.test"
    assert log["message"] == "advanced"
    assert "timestamp" in log
    assert "tournament_id" not in log


def test_json_formatter_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(tournament_id=4, user_id=2, round_number=3, unrelated="x"),
    ))
    assert (log["tournament_id"], log["user_id"], log["round_number"]) == (4, 2, 3)
    assert "unrelated" not in log


def test_text_formatter_appends_extras():
    line = TextFormatter().format(_record(tournament_id=4, round_number=1))
    assert "minigame.test: advanced" in line
    assert line.endswith("tournament_id=4 round_number=1")


# ─── setup_logging ───────────────────────────────────────────────

def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    level = root.level
    try:
        first = setup_logging("DEBUG", "text")
        second = setup_logging("INFO", "json")
        assert first not in root.handlers
        assert second in root.handlers
        assert isinstance(second.formatter, JSONFormatter)
        assert root.level == logging.INFO
    finally:
        root.removeHandler(second)
        root.setLevel(level)


# ─── settings ────────────────────────────────────────────────────

def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_non_postgres_url_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url.startswith("sqlite+aiosqlite")


def test_settings_reject_non_positive_retry():
    with pytest.raises(ValidationError):
        Settings(db_connect_retry_seconds=0)


def test_settings_reject_unknown_log_format():
    with pytest.raises(ValidationError):
        Settings(log_format="xml")
