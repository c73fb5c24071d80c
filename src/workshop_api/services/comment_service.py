"""CRUD helpers for comments."""
from __future__ import annotations

import logging
from typing import Any

from workshop_api.core.errors import BadRequestError, NotFoundError
from workshop_api.db.store import DocumentStore
from workshop_api.models import Comment
from workshop_api.schemas.comment import CommentPatch, CommentWrite
from workshop_api.services.lookup import find, find_index

__all__ = [
    "list_comments",
    "list_post_comments",
    "get_comment",
    "create_comment",
    "replace_comment",
    "update_comment",
    "delete_comment",
]

COMMENT_NOT_FOUND = "Comment not found"
INVALID_POST_ID = "Invalid postId: post does not exist"

logger = logging.getLogger(__name__)


def _post_exists(store: DocumentStore, post_id: int | None) -> bool:
    return find(store.data.posts, post_id) is not None


def _require_index(store: DocumentStore, comment_id: int | None) -> int:
    index = find_index(store.data.comments, comment_id)
    if index is None:
        raise NotFoundError(COMMENT_NOT_FOUND)
    return index


def list_comments(store: DocumentStore) -> list[Comment]:
    """Return every comment in insertion order."""
    return list(store.data.comments)


def list_post_comments(store: DocumentStore, post_id: int | None) -> list[Comment]:
    """Return the comments on a post.

    The post itself is not checked; an unknown id yields an empty list.
    """
    return [comment for comment in store.data.comments if comment.post_id == post_id]


def get_comment(store: DocumentStore, comment_id: int | None) -> Comment:
    """Return a single comment or raise ``NotFoundError``."""
    comment = find(store.data.comments, comment_id)
    if comment is None:
        raise NotFoundError(COMMENT_NOT_FOUND)
    return comment


def create_comment(store: DocumentStore, payload: Any) -> Comment:
    """Validate, assign the next comment id, append and persist."""
    data = CommentWrite.parse(payload)
    if not _post_exists(store, data.post_id):
        raise BadRequestError(INVALID_POST_ID)

    comments = store.data.comments
    comment = Comment(
        id=store.next_id("comment_id", (c.id for c in comments)),
        post_id=data.post_id,
        name=data.name,
        email=data.email,
        body=data.body,
    )
    comments.append(comment)
    store.write()
    logger.info("Created comment %d on post %d", comment.id, comment.post_id)
    return comment


def replace_comment(store: DocumentStore, comment_id: int | None, payload: Any) -> Comment:
    """Replace every field of an existing comment; the id comes from the path."""
    index = _require_index(store, comment_id)
    data = CommentWrite.parse(payload)
    if not _post_exists(store, data.post_id):
        raise BadRequestError(INVALID_POST_ID)

    comment = Comment(
        id=store.data.comments[index].id,
        post_id=data.post_id,
        name=data.name,
        email=data.email,
        body=data.body,
    )
    store.data.comments[index] = comment
    store.write()
    return comment


def update_comment(store: DocumentStore, comment_id: int | None, payload: Any) -> Comment:
    """Merge the supplied fields into an existing comment."""
    index = _require_index(store, comment_id)
    changes = CommentPatch.parse(payload).changes()
    if "post_id" in changes and not _post_exists(store, changes["post_id"]):
        raise BadRequestError(INVALID_POST_ID)

    comment = store.data.comments[index].model_copy(update=changes)
    store.data.comments[index] = comment
    store.write()
    return comment


def delete_comment(store: DocumentStore, comment_id: int | None) -> None:
    """Remove a comment."""
    index = _require_index(store, comment_id)
    removed = store.data.comments.pop(index)
    store.write()
    logger.info("Deleted comment %d", removed.id)
