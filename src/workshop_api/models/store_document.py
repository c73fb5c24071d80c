"""The single JSON document holding every entity."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .comment import Comment
from .post import Post
from .token import TokenRecord
from .user import User


class Counters(BaseModel):
    """Monotonic id generators, one per namespace.

    A namespace without a stored value is initialised from the highest id
    already in use the first time it is needed.
    """

    post_id: int | None = Field(default=None, alias="postId")
    token: int | None = None
    comment_id: int | None = Field(default=None, alias="commentId")
    user_id: int | None = Field(default=None, alias="userId")

    model_config = ConfigDict(populate_by_name=True)

    def allocate(self, namespace: str, existing_ids: Iterable[int] = ()) -> int:
        """Return the next value for ``namespace`` and advance the counter."""
        current = getattr(self, namespace)
        if not current:
            current = max(existing_ids, default=0) + 1
        setattr(self, namespace, current + 1)
        return current


class StoreDocument(BaseModel):
    """Top-level persisted layout: users, posts, comments, tokens, counters."""

    users: list[User] = Field(default_factory=list)
    posts: list[Post] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    tokens: dict[str, TokenRecord] = Field(default_factory=dict)
    counters: Counters = Field(default_factory=Counters)
