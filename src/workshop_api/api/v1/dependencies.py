"""Shared API dependencies for authentication and request parsing."""

import re
from typing import Annotated, Any

from fastapi import Body, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from workshop_api.db.store import DocumentStore, get_store
from workshop_api.models import TokenRecord
from workshop_api.services.token_authority import TokenAuthority

# Registered for the OpenAPI security scheme; verification reads the raw header.
bearer_scheme = HTTPBearer(auto_error=False, description="Token from POST /oauth/token")

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|(\d+))")

# Type alias for the per-request store dependency
StoreDep = Annotated[DocumentStore, Depends(get_store)]

# Optional JSON object body; malformed or non-object bodies become 400s
JsonBody = Annotated[dict[str, Any] | None, Body()]


def parse_path_id(raw: str) -> int | None:
    """Parse a path id from its leading integer.

    ``"12abc"`` yields 12 and a ``0x`` prefix reads hex digits, so
    ``"0x10"`` yields 16. Text with no leading integer, or a bare ``"0x"``,
    yields None, which never matches a stored id.

    Args:
        raw: Path segment as received

    Returns:
        The parsed id, or None
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value


async def get_token_authority(store: StoreDep) -> TokenAuthority:
    """Return a token authority bound to the request's store."""
    return TokenAuthority(store)


TokenAuthorityDep = Annotated[TokenAuthority, Depends(get_token_authority)]


async def get_current_token(
    request: Request,
    authority: TokenAuthorityDep,
    _credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenRecord:
    """Verify the bearer token on the request.

    Args:
        request: Incoming request carrying the ``Authorization`` header
        authority: Token authority bound to the current store

    Returns:
        The stored record for the presented token

    Raises:
        UnauthorizedError: If the header is missing, malformed or unknown
    """
    return authority.verify(request.headers.get("authorization"))


# Type alias for the verified token dependency
CurrentTokenDep = Annotated[TokenRecord, Depends(get_current_token)]
