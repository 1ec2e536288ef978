"""Unit tests for reusable field constraints."""

from __future__ import annotations

import pytest

from users_api.validation.constraints import INVALID_EMAIL_MESSAGE
from users_api.validation.constraints import NOT_BLANK_MESSAGE
from users_api.validation.constraints import TRIMMED_MESSAGE
from users_api.validation.constraints import email_address
from users_api.validation.constraints import length_between
from users_api.validation.constraints import not_blank
from users_api.validation.constraints import trimmed


@pytest.mark.parametrize("value", [None, "", " ", "\t\n"])
def test_not_blank_rejects_missing_and_whitespace_only_values(value: str | None) -> None:
    assert not_blank()(value) == NOT_BLANK_MESSAGE


def test_not_blank_accepts_text() -> None:
    assert not_blank()("Thales") is None


def test_length_between_uses_inclusive_bounds() -> None:
    check = length_between(3, 50)

    assert check("ab") == "must be between 3 and 50 characters"
    assert check("abc") is None
    assert check("a" * 50) is None
    assert check("a" * 51) == "must be between 3 and 50 characters"


def test_length_between_ignores_missing_values() -> None:
    assert length_between(3, 20)(None) is None


def test_length_between_accepts_custom_message() -> None:
    assert length_between(1, 2, "too long")("abc") == "too long"


def test_length_between_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        length_between(5, 2)


@pytest.mark.parametrize("value", ["thales.email.com", "thales@", "@email.com", "thales@@email.com"])
def test_email_address_rejects_malformed_addresses(value: str) -> None:
    assert email_address()(value) == INVALID_EMAIL_MESSAGE


@pytest.mark.parametrize("value", [None, "", "thales@email.com"])
def test_email_address_accepts_valid_or_absent_values(value: str | None) -> None:
    assert email_address()(value) is None


@pytest.mark.parametrize(
    "value",
    [
        "thales@localhost",
        "thales@mail.test",
        "thales@email.local",
        "a@b",
        '"a b"@email.com',
    ],
)
def test_email_address_accepts_syntactically_valid_non_public_addresses(value: str) -> None:
    assert email_address()(value) is None


@pytest.mark.parametrize("value", ["Thales ", " Thales", "\tThales", "Thales\n", "   "])
def test_trimmed_rejects_boundary_whitespace(value: str) -> None:
    assert trimmed()(value) == TRIMMED_MESSAGE


@pytest.mark.parametrize("value", [None, "", "Thales", "Thales Nunes"])
def test_trimmed_accepts_values_without_boundary_whitespace(value: str | None) -> None:
    assert trimmed()(value) is None
