from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from app.core.llm.deps import get_openai_client
from app.main import create_app
from tests.songs._fakes import FailingChatClient, FakeChatClient


@pytest.mark.parametrize(
    ("llm_client", "path", "detail"),
    [
        (None, "/songs/stringprompt/topSong", "LLM service unavailable"),
        (FailingChatClient(), "/songs/stringprompt/topSong/1984", "LLM service failed"),
        (
            FakeChatClient(content="Thrift Shop, I think."),
            "/songs/objectreturn/topsong/2013",
            "LLM output could not be converted",
        ),
    ],
    ids=["unavailable", "upstream", "structured_output"],
)
def test_llm_failure_logs_one_metadata_record(
    caplog: pytest.LogCaptureFixture, llm_client, path: str, detail: str
) -> None:
    caplog.set_level(logging.INFO, logger="app.llm_errors")
    app = create_app()
    app.dependency_overrides[get_openai_client] = lambda: llm_client

    with TestClient(app) as client:
        res = client.get(path, headers={"X-Request-ID": "req_llm_err_1"})

    assert res.status_code == 502
    assert res.json() == {"detail": detail}

    records = [r for r in caplog.records if r.name == "app.llm_errors"]
    assert len(records) == 1
    record = records[0]
    assert record.levelno == logging.INFO
    assert record.__dict__["request_id"] == "req_llm_err_1"
    assert record.__dict__["http_method"] == "GET"
    assert record.__dict__["request_path"] == path
    assert record.__dict__["status_code"] == 502
