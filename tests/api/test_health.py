import pytest
from fastapi.testclient import TestClient

from reqbot.api.main import create_app


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["message"] == "Server Healthy"
    assert "environment" in body


def test_correlation_id_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "req-123"})
    assert response.headers["X-Correlation-ID"] == "req-123"


def test_correlation_id_generated(client):
    response = client.get("/api/v1/health")
    assert response.headers["X-Correlation-ID"]
