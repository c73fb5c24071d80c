# src/workshop_api/models/__init__.py
"""Record types persisted in the document store."""

from .comment import Comment
from .post import Post
from .store_document import Counters, StoreDocument
from .token import TokenRecord
from .user import Role, User

__all__ = [
    "Comment",
    "Counters",
    "Post",
    "Role",
    "StoreDocument",
    "TokenRecord",
    "User",
]
