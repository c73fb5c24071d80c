# src/workshop_api/schemas/__init__.py
"""
Request and response schemas for the HTTP surface.

Request schemas validate raw JSON bodies at the boundary and raise
``BadRequestError`` with the endpoint's contract message on failure.
"""

from .comment import CommentPatch, CommentWrite
from .common import MessageResponse, PatchBody, RequestBody
from .document import DocumentCreate, DocumentResponse
from .oauth import TokenInfoResponse
from .post import PostPatch, PostWrite
from .user import UserCreate

__all__ = [
    "CommentPatch", "CommentWrite",
    "DocumentCreate", "DocumentResponse",
    "MessageResponse", "PatchBody", "RequestBody",
    "PostPatch", "PostWrite",
    "TokenInfoResponse",
    "UserCreate",
]
