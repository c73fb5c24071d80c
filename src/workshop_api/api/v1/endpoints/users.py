# src/workshop_api/api/v1/endpoints/users.py
"""User endpoints: public listing, admin listing and signup."""

from fastapi import APIRouter, status

from workshop_api.api.v1.dependencies import CurrentTokenDep, JsonBody, StoreDep, parse_path_id
from workshop_api.models import User
from workshop_api.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(store: StoreDep) -> list[User]:
    """List users, excluding admins."""
    return user_service.list_public_users(store)


# Registered before /{user_id} so "admin" is not parsed as an id.
@router.get("/admin")
async def list_admin_users(store: StoreDep, _token: CurrentTokenDep) -> list[User]:
    """List admin users. Requires a bearer token."""
    return user_service.list_admin_users(store)


@router.get("/{user_id}")
async def get_user(user_id: str, store: StoreDep) -> User:
    """Get a user by id.

    Admins are reported as not found, exactly like an unknown id.
    """
    return user_service.get_public_user(store, parse_path_id(user_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(store: StoreDep, payload: JsonBody = None) -> User:
    """Sign up a new user with role ``user``."""
    return user_service.create_user(store, payload or {})
