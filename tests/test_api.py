"""Application-level tests: health, error envelope, CORS."""

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from todogenie.config import Settings
from todogenie.main import app


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["environment"] == "development"
    assert "timestamp" in body


def test_health_check_database_down(client, monkeypatch):
    def broken_ping(db):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr("todogenie.api.health.ping", broken_ping)

    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["database"] == "disconnected"


def test_unknown_api_endpoint(client):
    response = client.get("/api/does/not/exist")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "ENDPOINT_NOT_FOUND"
    assert body["message"] == "API endpoint /api/does/not/exist not found"


def test_unsupported_method_on_api_path_is_not_found(client, auth_headers, create_task):
    """A known path with an unrouted method is reported like an unknown endpoint."""
    task = create_task(auth_headers)
    task_url = f"/api/tasks/{task['task_id']}"

    responses = {
        task_url: client.put(task_url, headers=auth_headers, json={"task_name": "x"}),
        "/api/health": client.post("/api/health"),
        "/api/auth/login": client.get("/api/auth/login"),
    }

    for path, response in responses.items():
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "ENDPOINT_NOT_FOUND"
        assert body["message"] == f"API endpoint {path} not found"


def test_bare_api_prefix_is_not_found(client):
    response = client.get("/api")
    assert response.status_code == 404
    assert response.json()["error_code"] == "ENDPOINT_NOT_FOUND"


def test_unhandled_error_is_json(client, monkeypatch):
    """Anything uncaught still yields a JSON error body."""

    def exploding_ping(db):
        raise RuntimeError("boom")

    monkeypatch.setattr("todogenie.api.health.ping", exploding_ping)

    with TestClient(app, raise_server_exceptions=False) as raw_client:
        response = raw_client.get("/api/health")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "UNHANDLED_ERROR"
    assert body["details"]["message"] == "boom"


def test_error_details_hidden_outside_development(client, monkeypatch):
    production = Settings(environment="production", jwt_secret="a-real-secret")
    monkeypatch.setattr("todogenie.errors.get_settings", lambda: production)

    response = client.post("/api/auth/register", json={"email": "bad", "password": "x"})
    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert "details" not in body


def test_cors_preflight_allows_configured_origin(client):
    response = client.options(
        "/api/tasks",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"
