"""
Test the main application endpoints.
"""
from fastapi.testclient import TestClient


def test_health_check(client: TestClient):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "service" in data
    assert "version" in data


def test_root_endpoint(client: TestClient):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert "message" in data
    assert "version" in data


def test_docs_available(client: TestClient):
    response = client.get("/docs")
    assert response.status_code == 200


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers.get("X-Request-ID")


def test_unknown_route_uses_error_envelope(client: TestClient):
    response = client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json()["error"]["type"] == "http_error"
