# src/workshop_api/api/v1/endpoints/oauth.py
"""OAuth2 client-credentials token endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Form

from workshop_api.api.v1.dependencies import TokenAuthorityDep
from workshop_api.models import TokenRecord

router = APIRouter(prefix="/oauth", tags=["oauth"])


@router.post("/token")
async def issue_token(
    authority: TokenAuthorityDep,
    grant_type: Annotated[str | None, Form()] = None,
    client_id: Annotated[str | None, Form()] = None,
    client_secret: Annotated[str | None, Form()] = None,
    scope: Annotated[str | None, Form()] = None,
) -> TokenRecord:
    """Exchange form-encoded client credentials for a bearer token.

    Args:
        authority: Token authority bound to the current store
        grant_type: Must be ``client_credentials``
        client_id: Registered client id
        client_secret: Registered client secret
        scope: Optional scope; defaults to the configured scope

    Returns:
        The stored token record

    Raises:
        UnsupportedGrantTypeError: For any other grant type (400)
        InvalidClientError: For a wrong id/secret pair (401)
    """
    return authority.issue_token(grant_type, client_id, client_secret, scope)
