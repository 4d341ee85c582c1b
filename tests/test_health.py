from __future__ import annotations


def test_health_ok(client) -> None:
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_docs_pages_are_served(client) -> None:
    assert client.get("/docs").status_code == 200
    assert client.get("/swagger").status_code == 200

    schema = client.get("/openapi.json").json()
    assert "/songs/objectreturn/topsong/{year}" in schema["paths"]
