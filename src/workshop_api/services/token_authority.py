"""Client-credentials token issuance and bearer verification."""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Callable

from workshop_api.core.errors import (
    InvalidClientError,
    UnauthorizedError,
    UnsupportedGrantTypeError,
)
from workshop_api.core.settings import settings
from workshop_api.db.store import DocumentStore
from workshop_api.models import TokenRecord

logger = logging.getLogger(__name__)

CLIENT_CREDENTIALS = "client_credentials"
BEARER_PREFIX = "Bearer "


class TokenAuthority:
    """Issues opaque bearer tokens and checks them against the store.

    Tokens are valid for as long as they exist in the store. ``expires_in``
    is reported to clients but never checked.
    """

    def __init__(
        self,
        store: DocumentStore,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._client_id = client_id if client_id is not None else settings.oauth_client_id
        self._client_secret = (
            client_secret if client_secret is not None else settings.oauth_client_secret
        )
        self._clock = clock

    def issue_token(
        self,
        grant_type: str | None,
        client_id: str | None,
        client_secret: str | None,
        scope: str | None = None,
    ) -> TokenRecord:
        """Exchange client credentials for a new token record.

        Raises:
            UnsupportedGrantTypeError: grant type is not ``client_credentials``
            InvalidClientError: the id/secret pair does not match
        """
        if grant_type != CLIENT_CREDENTIALS:
            logger.warning("Rejected token request with grant_type=%r", grant_type)
            raise UnsupportedGrantTypeError("Only client_credentials grant type is supported")

        if not self._credentials_match(client_id, client_secret):
            logger.warning("Rejected token request for client_id=%r", client_id)
            raise InvalidClientError("Invalid client credentials")

        # Counter plus timestamp keeps tokens unique within the same millisecond.
        issued_at = int(self._clock() * 1000)
        sequence = self._store.next_id("token")
        access_token = f"{settings.token_prefix}{sequence}_{issued_at}"

        record = TokenRecord(
            access_token=access_token,
            expires_in=settings.token_expires_in,
            scope=scope or settings.default_scope,
            created_at=issued_at,
        )
        self._store.data.tokens[access_token] = record
        self._store.write()
        logger.info("Issued token #%d with scope %r", sequence, record.scope)
        return record

    def verify(self, authorization: str | None) -> TokenRecord:
        """Resolve an ``Authorization`` header value to its token record."""
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise UnauthorizedError("Missing or invalid authorization header")

        token = authorization[len(BEARER_PREFIX):]
        record = self._store.data.tokens.get(token)
        if record is None:
            raise UnauthorizedError("Invalid token")
        return record

    def _credentials_match(self, client_id: str | None, client_secret: str | None) -> bool:
        id_ok = secrets.compare_digest((client_id or "").encode(), self._client_id.encode())
        secret_ok = secrets.compare_digest(
            (client_secret or "").encode(),
            self._client_secret.encode(),
        )
        return id_ok and secret_ok
