# src/workshop_api/schemas/comment.py
"""Comment request schemas."""

from typing import ClassVar

from pydantic import Field, StrictInt

from .common import PatchBody, RequestBody

INVALID_COMMENT_TYPES = (
    "Invalid field types: name, email and body must be strings, postId must be an integer"
)


class CommentWrite(RequestBody):
    """Full comment payload, used by both create and replace."""

    required_fields: ClassVar[tuple[str, ...]] = ("postId", "name", "email", "body")
    missing_message: ClassVar[str] = "Missing required fields: postId, name, email, body"
    invalid_message: ClassVar[str] = INVALID_COMMENT_TYPES

    post_id: StrictInt = Field(..., alias="postId", description="Parent; must reference an existing post")
    name: str
    email: str
    body: str


class CommentPatch(PatchBody):
    """Partial comment payload; omitted fields keep their stored values."""

    nullable_fields: ClassVar[tuple[str, ...]] = ("post_id",)
    invalid_message: ClassVar[str] = INVALID_COMMENT_TYPES

    post_id: StrictInt | None = Field(None, alias="postId")
    name: str | None = None
    email: str | None = None
    body: str | None = None
