"""CRUD helpers for posts."""
from __future__ import annotations

import logging
from typing import Any

from workshop_api.core.errors import BadRequestError, NotFoundError
from workshop_api.db.store import DocumentStore
from workshop_api.models import Post
from workshop_api.schemas.post import PostPatch, PostWrite
from workshop_api.services.lookup import find, find_index

__all__ = [
    "list_posts",
    "get_post",
    "create_post",
    "replace_post",
    "update_post",
    "delete_post",
]

POST_NOT_FOUND = "Post not found"
INVALID_USER_ID = "Invalid userId: user does not exist"

logger = logging.getLogger(__name__)


def _user_exists(store: DocumentStore, user_id: int | None) -> bool:
    return find(store.data.users, user_id) is not None


def _require_index(store: DocumentStore, post_id: int | None) -> int:
    index = find_index(store.data.posts, post_id)
    if index is None:
        raise NotFoundError(POST_NOT_FOUND)
    return index


def list_posts(store: DocumentStore) -> list[Post]:
    """Return every post in insertion order."""
    return list(store.data.posts)


def get_post(store: DocumentStore, post_id: int | None) -> Post:
    """Return a single post or raise ``NotFoundError``."""
    post = find(store.data.posts, post_id)
    if post is None:
        raise NotFoundError(POST_NOT_FOUND)
    return post


def create_post(store: DocumentStore, payload: Any) -> Post:
    """Validate, assign the next post id, append and persist."""
    data = PostWrite.parse(payload)
    if not _user_exists(store, data.user_id):
        raise BadRequestError(INVALID_USER_ID)

    posts = store.data.posts
    post = Post(
        id=store.next_id("post_id", (p.id for p in posts)),
        title=data.title,
        body=data.body,
        user_id=data.user_id,
    )
    posts.append(post)
    store.write()
    logger.info("Created post %d for user %d", post.id, post.user_id)
    return post


def replace_post(store: DocumentStore, post_id: int | None, payload: Any) -> Post:
    """Replace every field of an existing post; the id comes from the path.

    Checks run in order: existence, required fields, then the author.
    """
    index = _require_index(store, post_id)
    data = PostWrite.parse(payload)
    if not _user_exists(store, data.user_id):
        raise BadRequestError(INVALID_USER_ID)

    post = Post(
        id=store.data.posts[index].id,
        title=data.title,
        body=data.body,
        user_id=data.user_id,
    )
    store.data.posts[index] = post
    store.write()
    return post


def update_post(store: DocumentStore, post_id: int | None, payload: Any) -> Post:
    """Merge the supplied fields into an existing post."""
    index = _require_index(store, post_id)
    changes = PostPatch.parse(payload).changes()
    if "user_id" in changes and not _user_exists(store, changes["user_id"]):
        raise BadRequestError(INVALID_USER_ID)

    post = store.data.posts[index].model_copy(update=changes)
    store.data.posts[index] = post
    store.write()
    return post


def delete_post(store: DocumentStore, post_id: int | None) -> None:
    """Remove a post. Its comments are left in place."""
    index = _require_index(store, post_id)
    removed = store.data.posts.pop(index)
    store.write()
    logger.info("Deleted post %d", removed.id)
