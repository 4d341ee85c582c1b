from __future__ import annotations

import json
import logging

from app.core.logging import JsonFormatter


def _format(**extra: object) -> dict:
    record = logging.makeLogRecord(
        {"name": "app.songs", "levelname": "INFO", "levelno": logging.INFO, "msg": "hello", **extra}
    )
    return json.loads(JsonFormatter().format(record))


def test_missing_extras_become_null() -> None:
    payload = _format()
    assert payload["message"] == "hello"
    assert payload["logger"] == "app.songs"
    assert payload["request_id"] is None
    assert payload["model"] is None
    assert payload["total_tokens"] is None


def test_llm_metadata_extras_are_emitted() -> None:
    payload = _format(
        request_id="req_1",
        model="gpt-4o-mini",
        prompt_tokens=10,
        completion_tokens=5,
        total_tokens=15,
        http_method="GET",
        request_path="/songs/objectreturn/topsong/{year}",
    )
    assert payload["request_id"] == "req_1"
    assert payload["model"] == "gpt-4o-mini"
    assert (payload["prompt_tokens"], payload["completion_tokens"], payload["total_tokens"]) == (
        10,
        5,
        15,
    )
    assert payload["method"] == "GET"
    assert payload["path"] == "/songs/objectreturn/topsong/{year}"
