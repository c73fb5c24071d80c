# src/workshop_api/api/v1/endpoints/protected.py
"""Bearer-protected endpoints mounted under /api/v1."""

from fastapi import APIRouter, status

from workshop_api.api.v1.dependencies import CurrentTokenDep, JsonBody, StoreDep
from workshop_api.models import User
from workshop_api.schemas.document import DocumentResponse
from workshop_api.schemas.oauth import TokenInfoResponse
from workshop_api.services import document_service, user_service

router = APIRouter(tags=["protected"])


@router.get("/users")
async def list_all_users(store: StoreDep, _token: CurrentTokenDep) -> list[User]:
    """List every user, admins included."""
    return user_service.list_all_users(store)


@router.post("/documents", status_code=status.HTTP_201_CREATED)
async def create_document(_token: CurrentTokenDep, payload: JsonBody = None) -> DocumentResponse:
    """Validate and echo a document. Documents are never stored."""
    return document_service.create_document(payload or {})


@router.get("/oauth/token/info")
async def get_token_info(token: CurrentTokenDep) -> TokenInfoResponse:
    """Describe the presented token."""
    return TokenInfoResponse(**token.model_dump(), active=True)
