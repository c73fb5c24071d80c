# src/workshop_api/schemas/user.py
"""User request schemas."""

from typing import ClassVar

from pydantic import StrictStr

from .common import RequestBody


class UserCreate(RequestBody):
    """Signup payload. The role is always ``user`` and cannot be supplied."""

    required_fields: ClassVar[tuple[str, ...]] = ("name", "email")
    missing_message: ClassVar[str] = "Missing required fields: name and email are required"
    invalid_message: ClassVar[str] = "Invalid field types: name and email must be strings"

    name: StrictStr
    email: StrictStr
