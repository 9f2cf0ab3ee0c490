"""Tests for GET /api/health and the JSON error envelope."""

from fastapi.testclient import TestClient

from detector_relay.main import app


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["message"]


def test_health_does_not_need_configuration():
    # No `with` block: the lifespan never runs, so no settings are loaded.
    bare = TestClient(app)
    response = bare.get("/api/health")
    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_envelope(client):
    response = client.get("/api/analyze")
    assert response.status_code == 405
    assert "error" in response.json()
