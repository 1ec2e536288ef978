"""Pydantic schemas and field constraints for user API payloads."""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel
from pydantic import ConfigDict

from users_api.schemas.error import FieldError
from users_api.validation.constraints import email_address
from users_api.validation.constraints import length_between
from users_api.validation.constraints import not_blank
from users_api.validation.constraints import trimmed
from users_api.validation.validator import ConstraintTable
from users_api.validation.validator import validate


class UserRequest(BaseModel):
    """Payload to create or update a user."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None
    password: str | None = None


USER_REQUEST_CONSTRAINTS: ConstraintTable = MappingProxyType(
    {
        "name": (not_blank(), length_between(3, 50), trimmed()),
        "email": (not_blank(), email_address(), trimmed()),
        "password": (not_blank(), length_between(3, 20), trimmed()),
    }
)


def validate_user_request(payload: UserRequest) -> list[FieldError]:
    """Return every constraint violation for a user payload, in order."""
    return validate(payload, USER_REQUEST_CONSTRAINTS)


class UserResponse(BaseModel):
    """User response payload."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    password: str
