# src/workshop_api/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    comments_router,
    oauth_router,
    posts_router,
    protected_router,
    system_router,
    users_router,
)

__all__ = [
    "comments_router",
    "oauth_router",
    "posts_router",
    "protected_router",
    "system_router",
    "users_router",
]
