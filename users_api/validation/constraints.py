"""Reusable field constraints.

A constraint is a callable taking the raw field value and returning the
violation message, or ``None`` when the value is acceptable. Constraints never
modify the value they inspect. Apart from ``not_blank``, every constraint
accepts ``None`` so that absence is reported once, by the non-blank rule.
"""

from __future__ import annotations

from collections.abc import Callable

import email_validator
from email_validator import EmailNotValidError
from email_validator import validate_email

Constraint = Callable[[str | None], str | None]

NOT_BLANK_MESSAGE = "must not be null or empty"
INVALID_EMAIL_MESSAGE = "invalid email"
TRIMMED_MESSAGE = "field cannot have blank spaces at the beginning or at end"

# Reserved names such as localhost or .test are still syntactically valid addresses.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def not_blank(message: str = NOT_BLANK_MESSAGE) -> Constraint:
    """Reject ``None``, empty and whitespace-only strings."""

    def check(value: str | None) -> str | None:
        if value is None or not value.strip():
            return message
        return None

    return check


def length_between(minimum: int, maximum: int, message: str | None = None) -> Constraint:
    """Reject strings whose length falls outside ``[minimum, maximum]``."""
    if minimum < 0 or maximum < minimum:
        raise ValueError(f"invalid length bounds: [{minimum}, {maximum}]")
    text = message or f"must be between {minimum} and {maximum} characters"

    def check(value: str | None) -> str | None:
        if value is None:
            return None
        if not minimum <= len(value) <= maximum:
            return text
        return None

    return check


def email_address(message: str = INVALID_EMAIL_MESSAGE) -> Constraint:
    """Reject strings that are not syntactically valid e-mail addresses.

    Empty strings pass here; blankness belongs to ``not_blank``. Only syntax is
    checked: single-label, reserved and literal domains and quoted local parts
    are accepted, and no DNS lookup is made.
    """

    def check(value: str | None) -> str | None:
        if not value:
            return None
        try:
            validate_email(
                value,
                check_deliverability=False,
                globally_deliverable=False,
                test_environment=True,
                allow_quoted_local=True,
                allow_domain_literal=True,
            )
        except EmailNotValidError:
            return message
        return None

    return check


def trimmed(message: str = TRIMMED_MESSAGE) -> Constraint:
    """Reject strings with leading or trailing whitespace, without trimming them."""

    def check(value: str | None) -> str | None:
        if value is None:
            return None
        if value != value.strip():
            return message
        return None

    return check
