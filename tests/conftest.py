# tests/conftest.py
from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Keep the module-level store away from the real DATA_PATH during imports.
os.environ.setdefault("DATA_PATH", str(Path(tempfile.mkdtemp(prefix="workshop-api-")) / "db.json"))

from workshop_api.db.store import DocumentStore
from workshop_api.main import app as fastapi_app

CLIENT_ID = "workshop_client_12345"
CLIENT_SECRET = "secret_abc123xyz789"


def client_credentials(**overrides: str) -> dict[str, str]:
    """Return a valid client-credentials form body with optional overrides."""
    form = {
        "grant_type": "client_credentials",
        "client_id": CLIENT_ID,
        "client_secret": CLIENT_SECRET,
    }
    form.update(overrides)
    return form


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def store(tmp_path: Path) -> DocumentStore:
    """Return an opened store seeded in a per-test directory."""
    document_store = DocumentStore(tmp_path / "db.json")
    document_store.open()
    return document_store


@pytest.fixture(autouse=True)
def install_store(app: FastAPI, store: DocumentStore) -> Iterator[None]:
    previous = app.state.store
    app.state.store = store
    try:
        yield
    finally:
        app.state.store = previous


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def access_token(client: TestClient) -> str:
    """Issue a token through the public token endpoint."""
    response = client.post("/oauth/token", data=client_credentials())
    assert response.status_code == 200
    return response.json()["access_token"]


@pytest.fixture()
def auth_headers(access_token: str) -> dict[str, str]:
    """Return authorization headers carrying a freshly issued token."""
    return {"Authorization": f"Bearer {access_token}"}
