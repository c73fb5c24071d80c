"""Document store access."""

from .store import DocumentStore, get_store

__all__ = ["DocumentStore", "get_store"]
