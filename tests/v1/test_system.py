"""Tests for system endpoints and the fallback error shape."""

from fastapi import status
from fastapi.testclient import TestClient


def test_root_welcome(client: TestClient) -> None:
    """Test the root welcome message."""
    r = client.get("/")
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"message": "Welcome to the API for tech writers workshop"}


def test_health(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"status": "ok"}


def test_unknown_route(client: TestClient) -> None:
    """Unmatched routes use the common error body."""
    r = client.get("/nope")
    assert r.status_code == status.HTTP_404_NOT_FOUND
    assert r.json() == {"error": "Not Found", "message": "Route GET:/nope not found"}


def test_method_not_allowed(client: TestClient) -> None:
    r = client.delete("/users/1")
    assert r.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert r.json()["error"] == "Method Not Allowed"
