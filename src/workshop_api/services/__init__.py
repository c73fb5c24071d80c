# src/workshop_api/services/__init__.py
"""Business logic operating on the document store."""

from .token_authority import TokenAuthority

__all__ = [
    "TokenAuthority",
]
