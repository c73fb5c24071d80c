"""Error kinds surfaced by the API.

Every error is terminal and user-visible. Handlers raise these and the
application renders them as JSON bodies with an ``error`` key.
"""

from __future__ import annotations

from typing import Any

from fastapi import status


class ApiError(RuntimeError):
    """Base exception for errors rendered as ``{"error", "message"}`` bodies."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal Server Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict[str, Any]:
        """Return the JSON body for this error."""
        return {"error": self.error, "message": self.message}


class BadRequestError(ApiError):
    """Raised for malformed, missing or referentially invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "Bad Request"


class UnauthorizedError(ApiError):
    """Raised when a bearer token is missing, malformed or unknown."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthorized"


class NotFoundError(ApiError):
    """Raised when an id does not resolve to a visible entity."""

    status_code = status.HTTP_404_NOT_FOUND
    error = "Not Found"


class OAuthError(ApiError):
    """Token endpoint failure, rendered in the OAuth2 error shape."""

    def to_body(self) -> dict[str, Any]:
        return {"error": self.error, "error_description": self.message}


class UnsupportedGrantTypeError(OAuthError):
    """Raised for any grant type other than ``client_credentials``."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "unsupported_grant_type"


class InvalidClientError(OAuthError):
    """Raised when the client id/secret pair does not match."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "invalid_client"


class StoreError(RuntimeError):
    """Raised when the backing document cannot be read or written."""
