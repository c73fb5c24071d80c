"""Issued bearer token record."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TokenRecord(BaseModel):
    """A token issued through the client-credentials grant.

    ``expires_in`` is descriptive only: nothing compares it against
    ``created_at``, so an issued token stays valid for the life of the store.
    """

    access_token: str
    token_type: Literal["Bearer"] = "Bearer"
    expires_in: int = Field(..., description="Lifetime in seconds (not enforced)")
    scope: str
    created_at: int = Field(..., description="Issue time in epoch milliseconds")
