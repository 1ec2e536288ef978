"""Unit tests for error envelope schemas."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from users_api.schemas.error import ErrorResponse
from users_api.schemas.error import FieldError
from users_api.schemas.error import ValidationErrorResponse


def test_validation_envelope_starts_empty_with_fixed_base_fields() -> None:
    envelope = ValidationErrorResponse(path="/users")

    assert envelope.status == 400
    assert envelope.error == "Validation error"
    assert envelope.message == "Error on validation attributes"
    assert envelope.errors == ()
    assert not envelope.is_populated


def test_add_error_preserves_insertion_order_and_duplicates() -> None:
    envelope = ValidationErrorResponse(path="/users")

    envelope.add_error("name", "first")
    envelope.add_error("email", "second")
    envelope.add_error("name", "third")

    assert envelope.errors == (
        FieldError(field_name="name", message="first"),
        FieldError(field_name="email", message="second"),
        FieldError(field_name="name", message="third"),
    )
    assert envelope.is_populated


def test_base_fields_cannot_be_reassigned() -> None:
    envelope = ValidationErrorResponse(path="/users")

    with pytest.raises(ValidationError):
        envelope.status = 500  # type: ignore[misc]


def test_validation_payload_uses_wire_field_names() -> None:
    envelope = ValidationErrorResponse(path="/users")
    envelope.add_error("name", "field cannot have blank spaces at the beginning or at end")

    payload = envelope.to_payload()

    assert set(payload) == {"timestamp", "path", "status", "error", "message", "errors"}
    assert payload["errors"] == [
        {"fieldName": "name", "message": "field cannot have blank spaces at the beginning or at end"},
    ]
    assert isinstance(datetime.fromisoformat(payload["timestamp"].replace("Z", "+00:00")), datetime)


def test_standard_payload_has_no_violation_list() -> None:
    payload = ErrorResponse(path="/users/1", status=404, error="Not Found", message="missing").to_payload()

    assert set(payload) == {"timestamp", "path", "status", "error", "message"}


def test_recorded_violations_cannot_be_removed() -> None:
    envelope = ValidationErrorResponse(path="/users")
    envelope.add_error("name", "first")

    with pytest.raises(AttributeError):
        envelope.errors.clear()  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        envelope.errors.pop()  # type: ignore[attr-defined]

    assert envelope.errors == (FieldError(field_name="name", message="first"),)
    assert envelope.is_populated
