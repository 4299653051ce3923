from fastapi.testclient import TestClient

from mssgpt.main import create_app


def test_health_endpoint():
    client = TestClient(create_app())

    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_does_not_need_api_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    client = TestClient(create_app())

    r = client.get("/health")
    assert r.status_code == 200
