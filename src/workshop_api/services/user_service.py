"""Read and signup helpers for users."""
from __future__ import annotations

import logging
from typing import Any

from workshop_api.core.errors import NotFoundError
from workshop_api.db.store import DocumentStore
from workshop_api.models import Role, User
from workshop_api.schemas.user import UserCreate
from workshop_api.services.lookup import find

__all__ = [
    "list_public_users",
    "list_admin_users",
    "list_all_users",
    "get_public_user",
    "create_user",
]

USER_NOT_FOUND = "User not found"

logger = logging.getLogger(__name__)


def list_public_users(store: DocumentStore) -> list[User]:
    """Return every user except admins."""
    return [user for user in store.data.users if not user.is_admin]


def list_admin_users(store: DocumentStore) -> list[User]:
    """Return only admins."""
    return [user for user in store.data.users if user.is_admin]


def list_all_users(store: DocumentStore) -> list[User]:
    """Return every user, admins included."""
    return list(store.data.users)


def get_public_user(store: DocumentStore, user_id: int | None) -> User:
    """Return a non-admin user.

    Admins produce the same 404 as an unknown id so their existence is
    not revealed through this lookup.
    """
    user = find(store.data.users, user_id)
    if user is None or user.is_admin:
        raise NotFoundError(USER_NOT_FOUND)
    return user


def create_user(store: DocumentStore, payload: Any) -> User:
    """Validate a signup payload and persist a new ``user``-role account."""
    data = UserCreate.parse(payload)
    users = store.data.users
    user = User(
        id=store.next_id("user_id", (u.id for u in users)),
        name=data.name,
        email=data.email,
        role=Role.user,
    )
    users.append(user)
    store.write()
    logger.info("Created user %d", user.id)
    return user
