"""Comment record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """A comment attached to an existing post."""

    id: int
    post_id: int = Field(alias="postId")
    name: str
    email: str
    body: str

    model_config = ConfigDict(populate_by_name=True)
