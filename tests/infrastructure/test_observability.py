"""Observability - JSON log formatting and the logged_action decorator."""

import json
import logging

import pytest

from customer_api.core.errors import BadInputError
from customer_api.infrastructure.observability import JSONFormatter, logged_action


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "customer_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_basic_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "customer_api.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out
    assert "action" not in out


def test_json_formatter_includes_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(action="get_customer", customer_id=5, secret="x"),
    ))
    assert out["action"] == "get_customer"
    assert out["customer_id"] == 5
    assert "secret" not in out


async def test_logged_action_logs_start_and_end(caplog):
    @logged_action("get_customer")
    async def handler(customer_id: int):
        return customer_id * 2

    with caplog.at_level(logging.INFO):
        assert await handler(customer_id=21) == 42

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["get_customer started", "get_customer completed"]
    assert caplog.records[-1].customer_id == 21
    assert caplog.records[-1].duration_ms >= 0


async def test_logged_action_reraises_unchanged(caplog):
    error = BadInputError("bad", "fullName")

    @logged_action("create_customer")
    async def handler():
        raise error

    with caplog.at_level(logging.INFO):
        with pytest.raises(BadInputError) as info:
            await handler()

    assert info.value is error
    failed = caplog.records[-1]
    assert failed.levelno == logging.WARNING
    assert failed.error_code == "BAD_INPUT"


def test_logged_action_keeps_signature():
    async def handler(customer_id: int, flag: bool = False):
        return None

    wrapped = logged_action("x")(handler)
    assert wrapped.__name__ == "handler"
    assert wrapped.__wrapped__ is handler
