"""Seed dataset written the first time the store is opened."""

from __future__ import annotations

from typing import Any

SEED_DATA: dict[str, Any] = {
    "users": [
        {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "user"},
        {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "role": "user"},
        {"id": 3, "name": "Admin User", "email": "admin@example.com", "role": "admin"},
    ],
    "posts": [
        {"id": 1, "title": "First Post", "body": "This is the first post", "userId": 1},
        {"id": 2, "title": "Second Post", "body": "This is the second post", "userId": 2},
    ],
    "comments": [
        {
            "id": 1,
            "postId": 1,
            "name": "Commenter 1",
            "email": "comment1@example.com",
            "body": "Great post!",
        },
        {
            "id": 2,
            "postId": 1,
            "name": "Commenter 2",
            "email": "comment2@example.com",
            "body": "Thanks for sharing!",
        },
        {
            "id": 3,
            "postId": 2,
            "name": "Commenter 3",
            "email": "comment3@example.com",
            "body": "Interesting read.",
        },
    ],
    "tokens": {},
    "counters": {"postId": 3, "token": 1},
}
