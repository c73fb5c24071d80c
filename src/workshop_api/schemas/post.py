# src/workshop_api/schemas/post.py
"""Post request schemas."""

from typing import ClassVar

from pydantic import Field, StrictInt

from .common import PatchBody, RequestBody

INVALID_POST_TYPES = "Invalid field types: title and body must be strings, userId must be an integer"


class PostWrite(RequestBody):
    """Full post payload, used by both create and replace."""

    required_fields: ClassVar[tuple[str, ...]] = ("title", "body", "userId")
    missing_message: ClassVar[str] = "Missing required fields: title, body, userId"
    invalid_message: ClassVar[str] = INVALID_POST_TYPES

    title: str
    body: str
    user_id: StrictInt = Field(..., alias="userId", description="Author; must reference an existing user")


class PostPatch(PatchBody):
    """Partial post payload; omitted fields keep their stored values."""

    nullable_fields: ClassVar[tuple[str, ...]] = ("user_id",)
    invalid_message: ClassVar[str] = INVALID_POST_TYPES

    title: str | None = None
    body: str | None = None
    user_id: StrictInt | None = Field(None, alias="userId")
