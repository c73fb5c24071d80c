"""User record."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class Role(str, Enum):
    """Roles a user can hold; fixed at creation."""

    user = "user"
    admin = "admin"


class User(BaseModel):
    """A user as stored in the document."""

    id: int
    name: str
    email: str
    role: Role = Role.user

    @property
    def is_admin(self) -> bool:
        return self.role is Role.admin
