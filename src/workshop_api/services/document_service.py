"""Ephemeral documents: validated and echoed, never persisted."""
from __future__ import annotations

import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from workshop_api.schemas.document import DocumentCreate, DocumentResponse

DEFAULT_CATEGORY = "general"


def create_document(payload: Any, clock: Callable[[], float] = time.time) -> DocumentResponse:
    """Build a document with a timestamp id. Nothing is written to the store."""
    data = DocumentCreate.parse(payload)
    now = clock()
    created_at = datetime.fromtimestamp(now, tz=UTC).isoformat(timespec="milliseconds")
    return DocumentResponse(
        id=int(now * 1000),
        title=data.title,
        content=data.content,
        category=data.category or DEFAULT_CATEGORY,
        created_at=created_at.replace("+00:00", "Z"),
    )
