"""Error envelope schemas shared across API handlers."""

from __future__ import annotations

from datetime import datetime
from datetime import timezone

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import PrivateAttr
from pydantic import computed_field

VALIDATION_ERROR = "Validation error"
VALIDATION_MESSAGE = "Error on validation attributes"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FieldError(BaseModel):
    """Single field-level validation issue."""

    model_config = ConfigDict(frozen=True)

    field_name: str = Field(serialization_alias="fieldName")
    message: str


class ErrorResponse(BaseModel):
    """Standard error body returned for every failed request."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=_utcnow)
    path: str
    status: int
    error: str
    message: str

    def to_payload(self) -> dict:
        """Serialize with wire names and ISO-8601 timestamps."""
        return self.model_dump(mode="json", by_alias=True)


class ValidationErrorResponse(ErrorResponse):
    """Error body for rejected payloads, carrying the per-field violations.

    Base fields are frozen at construction. Violations can only be appended
    with ``add_error`` and are read back as a tuple in insertion order.
    """

    status: int = 400
    error: str = VALIDATION_ERROR
    message: str = VALIDATION_MESSAGE

    _errors: list[FieldError] = PrivateAttr(default_factory=list)

    @computed_field
    @property
    def errors(self) -> tuple[FieldError, ...]:
        return tuple(self._errors)

    def add_error(self, field_name: str, message: str) -> None:
        self._errors.append(FieldError(field_name=field_name, message=message))

    @property
    def is_populated(self) -> bool:
        return bool(self._errors)
