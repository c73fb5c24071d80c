"""Post record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """A post authored by an existing user."""

    id: int
    title: str
    body: str
    user_id: int = Field(alias="userId")

    model_config = ConfigDict(populate_by_name=True)
