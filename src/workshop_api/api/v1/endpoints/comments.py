# src/workshop_api/api/v1/endpoints/comments.py
"""Comment endpoints for the Workshop API."""

from fastapi import APIRouter, status

from workshop_api.api.v1.dependencies import JsonBody, StoreDep, parse_path_id
from workshop_api.models import Comment
from workshop_api.schemas.common import MessageResponse
from workshop_api.services import comment_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("")
async def list_comments(store: StoreDep) -> list[Comment]:
    """List every comment."""
    return comment_service.list_comments(store)


@router.get("/{comment_id}")
async def get_comment(comment_id: str, store: StoreDep) -> Comment:
    """Get a specific comment by ID."""
    return comment_service.get_comment(store, parse_path_id(comment_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_comment(store: StoreDep, payload: JsonBody = None) -> Comment:
    """Create a comment on an existing post.

    Raises:
        BadRequestError: If a field is missing or postId does not reference a post
    """
    return comment_service.create_comment(store, payload or {})


@router.put("/{comment_id}")
async def replace_comment(comment_id: str, store: StoreDep, payload: JsonBody = None) -> Comment:
    """Replace a comment. Every field is required, as on create."""
    return comment_service.replace_comment(store, parse_path_id(comment_id), payload or {})


@router.patch("/{comment_id}")
async def update_comment(comment_id: str, store: StoreDep, payload: JsonBody = None) -> Comment:
    """Merge the supplied fields into a comment."""
    return comment_service.update_comment(store, parse_path_id(comment_id), payload or {})


@router.delete("/{comment_id}")
async def delete_comment(comment_id: str, store: StoreDep) -> MessageResponse:
    """Delete a comment and confirm with a message body."""
    comment_service.delete_comment(store, parse_path_id(comment_id))
    return MessageResponse(message="Comment deleted successfully")
