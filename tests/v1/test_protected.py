# tests/v1/test_protected.py
"""Tests for the bearer-protected /api/v1 endpoints."""

import re

from fastapi import status

MISSING_HEADER = {"error": "Unauthorized", "message": "Missing or invalid authorization header"}
NEW_DOCUMENT = {"title": "Guide", "content": "How to write docs"}


def test_all_users_requires_token(client) -> None:
    response = client.get("/api/v1/users")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == MISSING_HEADER


def test_all_users_includes_admins(client, auth_headers) -> None:
    response = client.get("/api/v1/users", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [u["id"] for u in data] == [1, 2, 3]
    assert data[2]["role"] == "admin"


def test_unknown_token_rejected(client) -> None:
    response = client.get("/api/v1/users", headers={"Authorization": "Bearer wks_token_9_9"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"error": "Unauthorized", "message": "Invalid token"}


def test_scheme_is_case_sensitive(client, access_token) -> None:
    response = client.get("/api/v1/users", headers={"Authorization": f"bearer {access_token}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == MISSING_HEADER


def test_create_document(client, auth_headers, store) -> None:
    response = client.post("/api/v1/documents", json=NEW_DOCUMENT, headers=auth_headers)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["title"] == "Guide"
    assert data["content"] == "How to write docs"
    assert data["category"] == "general"
    assert isinstance(data["id"], int)
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", data["created_at"])
    assert set(store.snapshot()) == {"users", "posts", "comments", "tokens", "counters"}


def test_create_document_keeps_category(client, auth_headers) -> None:
    response = client.post(
        "/api/v1/documents",
        json={**NEW_DOCUMENT, "category": "howto"},
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["category"] == "howto"


def test_create_document_missing_fields(client, auth_headers) -> None:
    response = client.post("/api/v1/documents", json={"title": "Only"}, headers=auth_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "error": "Bad Request",
        "message": "Missing required fields: title, content",
    }


def test_create_document_requires_token(client) -> None:
    response = client.post("/api/v1/documents", json=NEW_DOCUMENT)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_token_info(client, access_token, auth_headers) -> None:
    response = client.get("/api/v1/oauth/token/info", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["access_token"] == access_token
    assert data["token_type"] == "Bearer"
    assert data["active"] is True


def test_token_info_requires_token(client) -> None:
    response = client.get("/api/v1/oauth/token/info", headers={"Authorization": "Basic abc"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == MISSING_HEADER
