# tests/v1/test_users.py
"""Tests for user endpoints."""

from fastapi import status

NOT_FOUND_BODY = {"error": "Not Found", "message": "User not found"}


def test_list_users_excludes_admins(client) -> None:
    response = client.get("/users")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [u["id"] for u in data] == [1, 2]
    assert all(u["role"] == "user" for u in data)


def test_get_user(client) -> None:
    response = client.get("/users/1")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "id": 1,
        "name": "John Doe",
        "email": "john@example.com",
        "role": "user",
    }


def test_admin_user_is_indistinguishable_from_unknown(client) -> None:
    admin = client.get("/users/3")
    unknown = client.get("/users/999")

    assert admin.status_code == status.HTTP_404_NOT_FOUND
    assert unknown.status_code == status.HTTP_404_NOT_FOUND
    assert admin.json() == unknown.json() == NOT_FOUND_BODY


def test_non_numeric_user_id_is_not_found(client) -> None:
    response = client.get("/users/abc")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == NOT_FOUND_BODY


def test_admin_listing_requires_token(client) -> None:
    response = client.get("/users/admin")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {
        "error": "Unauthorized",
        "message": "Missing or invalid authorization header",
    }


def test_admin_listing_with_token(client, auth_headers) -> None:
    response = client.get("/users/admin", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    assert [u["id"] for u in response.json()] == [3]
    assert response.json()[0]["role"] == "admin"


def test_create_user_assigns_next_id(client) -> None:
    first = client.post("/users", json={"name": "Ada", "email": "ada@example.com"})
    second = client.post("/users", json={"name": "Bob", "email": "bob@example.com"})

    assert first.status_code == status.HTTP_201_CREATED
    assert first.json() == {"id": 4, "name": "Ada", "email": "ada@example.com", "role": "user"}
    assert second.json()["id"] == 5
    assert client.get("/users/4").json() == first.json()


def test_create_user_cannot_choose_role(client) -> None:
    response = client.post(
        "/users",
        json={"name": "Eve", "email": "eve@example.com", "role": "admin"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["role"] == "user"


def test_create_user_missing_fields(client) -> None:
    response = client.post("/users", json={"name": "Ada"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "error": "Bad Request",
        "message": "Missing required fields: name and email are required",
    }


def test_create_user_invalid_types(client) -> None:
    response = client.post("/users", json={"name": 42, "email": "x@example.com"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Invalid field types: name and email must be strings"


def test_create_user_persists(client, store) -> None:
    client.post("/users", json={"name": "Ada", "email": "ada@example.com"})

    raw = store.path.read_text(encoding="utf-8")
    assert "ada@example.com" in raw
    assert store.snapshot()["counters"]["userId"] == 5
