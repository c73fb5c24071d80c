# src/workshop_api/schemas/oauth.py
"""OAuth response schemas."""

from workshop_api.models import TokenRecord


class TokenInfoResponse(TokenRecord):
    """Introspection view of the presented token."""

    active: bool = True
