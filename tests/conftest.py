from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    # Tests must never reach a real provider; clients are injected via dependency overrides.
    # Empty env value wins over any developer .env file.
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.delenv("SONGS_SYSTEM_PROMPT", raising=False)
    # Settings are cached via @lru_cache; clear so env changes apply per test.
    from app.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from app.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c
