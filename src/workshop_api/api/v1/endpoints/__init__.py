# src/workshop_api/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .comments import router as comments_router
from .oauth import router as oauth_router
from .posts import router as posts_router
from .protected import router as protected_router
from .system import router as system_router
from .users import router as users_router

__all__ = [
    "comments_router",
    "oauth_router",
    "posts_router",
    "protected_router",
    "system_router",
    "users_router",
]
