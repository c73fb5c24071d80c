"""Shared request-body validation for write endpoints."""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic_core import PydanticCustomError

from workshop_api.core.errors import BadRequestError

MISSING_FIELDS = "missing_fields"


class RequestBody(BaseModel):
    """Base class for JSON request payloads.

    Fields named in ``required_fields`` must be present and truthy, so
    ``null``, ``""``, ``0`` and ``false`` all count as missing. Type checks
    run only once every required field is present.
    """

    required_fields: ClassVar[tuple[str, ...]] = ()
    missing_message: ClassVar[str] = "Missing required fields"
    invalid_message: ClassVar[str] = "Invalid field types"

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _require_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise PydanticCustomError(MISSING_FIELDS, "Request body must be a JSON object")
        missing = [name for name in cls.required_fields if not data.get(name)]
        if missing:
            raise PydanticCustomError(
                MISSING_FIELDS,
                "Missing required fields: {fields}",
                {"fields": ", ".join(missing)},
            )
        return data

    @classmethod
    def parse(cls, data: Any) -> Self:
        """Validate ``data`` or raise :class:`BadRequestError`."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            if any(err["type"] == MISSING_FIELDS for err in exc.errors()):
                raise BadRequestError(cls.missing_message) from exc
            raise BadRequestError(cls.invalid_message) from exc


class PatchBody(RequestBody):
    """Partial update payload: every field optional, explicit nulls rejected.

    Fields listed in ``nullable_fields`` may be ``null`` so the caller's
    referential check can reject them with its own message.
    """

    nullable_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_nulls(self) -> Self:
        for name in self.model_fields_set:
            if name not in self.nullable_fields and getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseModel):
    """Plain confirmation body."""

    message: str
