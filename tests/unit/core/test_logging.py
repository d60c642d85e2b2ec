"""Unit tests for structured logging setup."""

import json

import structlog

from genpass.core.config import Settings
from genpass.core.logging import (
    LoggingContext,
    add_correlation_id,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    rename_message_field,
)


def test_add_correlation_id_generates_when_missing():
    event = add_correlation_id(None, "info", {"event": "x"})
    assert event["correlation_id"].startswith("cid_")


def test_add_correlation_id_keeps_existing():
    event = add_correlation_id(None, "info", {"event": "x", "correlation_id": "abc"})
    assert event["correlation_id"] == "abc"


def test_rename_message_field():
    assert rename_message_field(None, "info", {"event": "hello"}) == {"message": "hello"}


def test_json_logging_to_stderr(capsys):
    configure_logging(Settings(environment="testing", log_format="json", log_level="DEBUG"))
    try:
        bind_correlation_id("cid_test")
        get_logger("genpass.test").info("Token issued", ttl_ms=1000)
    finally:
        clear_context()

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["message"] == "Token issued"
    assert record["correlation_id"] == "cid_test"
    assert record["ttl_ms"] == 1000
    assert record["level"] == "info"


def test_log_level_filters(capsys):
    configure_logging(Settings(environment="testing", log_format="json", log_level="WARNING"))
    get_logger("genpass.test").info("hidden")
    assert "hidden" not in capsys.readouterr().err


def test_logging_context_binds_and_unbinds():
    with LoggingContext(flow="magic_link"):
        assert structlog.contextvars.get_contextvars()["flow"] == "magic_link"
    assert "flow" not in structlog.contextvars.get_contextvars()
