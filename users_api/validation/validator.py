"""Evaluate constraint tables against request payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from users_api.schemas.error import FieldError
from users_api.validation.constraints import Constraint

ConstraintTable = Mapping[str, tuple[Constraint, ...]]


def validate(payload: Any, table: ConstraintTable) -> list[FieldError]:
    """Run every constraint in ``table`` against ``payload``.

    Fields are visited in table order and constraints in declaration order.
    Nothing short-circuits, so a field may report several violations.
    """
    violations: list[FieldError] = []
    for field_name, constraints in table.items():
        value = getattr(payload, field_name)
        for constraint in constraints:
            message = constraint(value)
            if message is not None:
                violations.append(FieldError(field_name=field_name, message=message))
    return violations
