# src/workshop_api/schemas/document.py
"""Schemas for the ephemeral document resource."""

from typing import ClassVar

from pydantic import BaseModel, Field

from .common import RequestBody


class DocumentCreate(RequestBody):
    """Payload accepted by ``POST /api/v1/documents``."""

    required_fields: ClassVar[tuple[str, ...]] = ("title", "content")
    missing_message: ClassVar[str] = "Missing required fields: title, content"
    invalid_message: ClassVar[str] = "Invalid field types: title, content and category must be strings"

    title: str
    content: str
    category: str | None = None


class DocumentResponse(BaseModel):
    """A document echoed back to the caller; never stored."""

    id: int = Field(..., description="Creation time in epoch milliseconds")
    title: str
    content: str
    category: str = "general"
    created_at: str
