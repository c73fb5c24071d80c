"""Tests for shared request dependencies."""

import asyncio
import inspect

import httpx
from fastapi import status

from workshop_api.api.v1.dependencies import get_current_token, get_token_authority
from workshop_api.db.store import DocumentStore, get_store

NEW_POST = {"title": "Concurrent", "body": "Body", "userId": 1}


def test_store_dependencies_run_on_event_loop() -> None:
    for dependency in (get_store, get_token_authority, get_current_token):
        assert inspect.iscoroutinefunction(dependency), dependency.__name__


def test_concurrent_creates_are_all_persisted(app, store) -> None:
    """Interleaved requests never drop a write made by another request."""

    async def create_many() -> list[httpx.Response]:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            return await asyncio.gather(
                *(client.post("/posts", json=NEW_POST) for _ in range(20))
            )

    responses = asyncio.run(create_many())

    assert all(r.status_code == status.HTTP_201_CREATED for r in responses)
    created = sorted(r.json()["id"] for r in responses)
    assert created == list(range(3, 23))

    stored = DocumentStore(store.path).open()
    assert [p.id for p in stored.posts] == [1, 2, *created]
