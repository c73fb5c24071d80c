# src/workshop_api/api/v1/endpoints/posts.py
"""Post endpoints for the Workshop API."""

from fastapi import APIRouter, status

from workshop_api.api.v1.dependencies import JsonBody, StoreDep, parse_path_id
from workshop_api.models import Comment, Post
from workshop_api.schemas.common import MessageResponse
from workshop_api.services import comment_service, post_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("")
async def list_posts(store: StoreDep) -> list[Post]:
    """List every post."""
    return post_service.list_posts(store)


@router.get("/{post_id}")
async def get_post(post_id: str, store: StoreDep) -> Post:
    """Get a specific post by ID.

    Args:
        post_id: ID of the post to retrieve
        store: Document store, freshly read

    Returns:
        The stored post

    Raises:
        NotFoundError: If no post has this id
    """
    return post_service.get_post(store, parse_path_id(post_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(store: StoreDep, payload: JsonBody = None) -> Post:
    """Create a post for an existing user.

    Raises:
        BadRequestError: If title, body or userId is missing, or userId
            does not reference a user
    """
    return post_service.create_post(store, payload or {})


@router.put("/{post_id}")
async def replace_post(post_id: str, store: StoreDep, payload: JsonBody = None) -> Post:
    """Replace a post. Every field is required, as on create."""
    return post_service.replace_post(store, parse_path_id(post_id), payload or {})


@router.patch("/{post_id}")
async def update_post(post_id: str, store: StoreDep, payload: JsonBody = None) -> Post:
    """Merge the supplied fields into a post. The id never changes."""
    return post_service.update_post(store, parse_path_id(post_id), payload or {})


@router.delete("/{post_id}")
async def delete_post(post_id: str, store: StoreDep) -> MessageResponse:
    """Delete a post and confirm with a message body."""
    post_service.delete_post(store, parse_path_id(post_id))
    return MessageResponse(message="Post deleted successfully")


@router.get("/{post_id}/comments", tags=["comments"])
async def list_post_comments(post_id: str, store: StoreDep) -> list[Comment]:
    """List the comments on a post; an unknown post gives an empty list."""
    return comment_service.list_post_comments(store, parse_path_id(post_id))
