"""Flat JSON document store.

The whole dataset lives in one :class:`StoreDocument` that is re-read from
disk before every request and written back in full after every mutation.
There is no locking around that read-modify-write cycle: two processes that
share the file and interleave between ``read()`` and ``write()`` can allocate
the same id.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from fastapi import Request
from pydantic import ValidationError

from workshop_api.core.errors import StoreError
from workshop_api.db.seed import SEED_DATA
from workshop_api.models import StoreDocument

logger = logging.getLogger(__name__)


class DocumentStore:
    """Owns the in-memory document and its backing file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.initialized = False
        self._data: StoreDocument | None = None

    @property
    def data(self) -> StoreDocument:
        """Return the current in-memory document."""
        if self._data is None:
            raise StoreError("Document store has not been opened")
        return self._data

    def open(self) -> StoreDocument:
        """Load the backing file, or seed it when absent.

        Only the first call does any work; later calls return the
        current document unchanged.
        """
        if self.initialized:
            return self.data

        if self.path.exists():
            self._data = self._load()
            logger.info("Loaded document store from %s", self.path)
        else:
            self._data = StoreDocument.model_validate(SEED_DATA)
            self.write()
            logger.info("Seeded document store at %s", self.path)

        self.initialized = True
        return self._data

    def read(self) -> StoreDocument:
        """Re-synchronise the in-memory document from the backing file."""
        if not self.initialized:
            return self.open()
        if self.path.exists():
            self._data = self._load()
        return self.data

    def write(self) -> None:
        """Persist the complete document atomically."""
        payload = self.data.model_dump_json(by_alias=True, exclude_none=True, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        temp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                delete=False,
                encoding="utf-8",
            ) as tf:
                temp_path = Path(tf.name)
                tf.write(payload)
            os.replace(temp_path, self.path)
        except OSError as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise StoreError(f"Failed to write document store to {self.path}: {exc}") from exc
        logger.debug("Wrote document store to %s", self.path)

    def next_id(self, namespace: str, existing_ids: Iterable[int] = ()) -> int:
        """Allocate the next id from the counter named ``namespace``."""
        return self.data.counters.allocate(namespace, existing_ids)

    def reset(self) -> StoreDocument:
        """Replace the document with the seed dataset and persist it."""
        self._data = StoreDocument.model_validate(SEED_DATA)
        self.write()
        self.initialized = True
        logger.info("Reset document store at %s", self.path)
        return self._data

    def snapshot(self) -> dict[str, Any]:
        """Return the document as plain JSON-compatible data."""
        return self.data.model_dump(mode="json", by_alias=True, exclude_none=True)

    def _load(self) -> StoreDocument:
        try:
            raw = self.path.read_text(encoding="utf-8")
            return StoreDocument.model_validate_json(raw)
        except (OSError, ValidationError) as exc:
            raise StoreError(f"Failed to load document store from {self.path}: {exc}") from exc


async def get_store(request: Request) -> DocumentStore:
    """Return the application's store, freshly read, for dependency injection.

    Runs on the event loop so a re-read cannot interleave with a
    handler's mutate-then-write.
    """
    store: DocumentStore = request.app.state.store
    store.read()
    return store
