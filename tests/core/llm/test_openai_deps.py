from __future__ import annotations

import pytest

from app.core.llm.deps import get_openai_client
from app.core.llm.openai_client import OpenAIClient
from app.core.settings import get_settings


def test_returns_none_without_api_key() -> None:
    assert get_openai_client() is None


def test_builds_client_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-test")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.2")
    get_settings.cache_clear()

    client = get_openai_client()

    assert isinstance(client, OpenAIClient)
    assert client._config.model == "gpt-test"
    assert client._config.temperature == 0.2
