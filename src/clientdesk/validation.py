"""
Input validation for client and project mutations.

Each entity kind has a declarative rule table. ``validate_input`` walks the
table in order and reports the first violated rule, so callers get one
human-readable message per failure. Validation never touches the store.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

PROJECT_STATUSES: tuple[str, ...] = ("Not Started", "In Progress", "Completed")
DEFAULT_PROJECT_STATUS = "Not Started"

_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)


class EntityKind(Enum):
    CLIENT = "client"
    PROJECT = "project"


@dataclass(frozen=True)
class FieldRule:
    """Constraints for one input field."""

    field: str
    required: bool = True
    min_length: int | None = None
    max_length: int | None = None
    one_of: tuple[str, ...] | None = None
    email: bool = False


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one input record."""

    valid: bool
    message: str | None = None
    field: str | None = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, field: str, message: str) -> ValidationResult:
        return cls(valid=False, message=message, field=field)


CLIENT_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", min_length=3, max_length=50),
    FieldRule("email", email=True),
    # Length only; the regional format is checked when the row is persisted.
    FieldRule("phone", min_length=10, max_length=15),
)

PROJECT_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", min_length=3, max_length=100),
    FieldRule("description", required=False, max_length=500),
    FieldRule("status", one_of=PROJECT_STATUSES),
    FieldRule("client_id"),
)

RULES: dict[EntityKind, tuple[FieldRule, ...]] = {
    EntityKind.CLIENT: CLIENT_RULES,
    EntityKind.PROJECT: PROJECT_RULES,
}


def _is_email(value: str) -> bool:
    try:
        _email_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def _check(rule: FieldRule, value: Any) -> str | None:
    """Return the message for the first constraint ``value`` breaks, if any."""
    label = f'"{rule.field}"'

    if not isinstance(value, str):
        return f"{label} must be a string"
    if value == "":
        return f"{label} is not allowed to be empty"
    if rule.min_length is not None and len(value) < rule.min_length:
        return f"{label} length must be at least {rule.min_length} characters long"
    if rule.max_length is not None and len(value) > rule.max_length:
        return f"{label} length must be less than or equal to {rule.max_length} characters long"
    if rule.one_of is not None and value not in rule.one_of:
        return f"{label} must be one of [{', '.join(rule.one_of)}]"
    if rule.email and not _is_email(value):
        return f"{label} must be a valid email"
    return None


def validate_input(
    kind: EntityKind, record: Mapping[str, Any], partial: bool = False
) -> ValidationResult:
    """
    Validate a raw mutation input against the rule table for ``kind``.

    Args:
        kind: Which entity the record describes
        record: Field values keyed by field name
        partial: Only validate keys present in ``record`` (used for updates).
            A present ``None`` clears an optional field and fails a required one.

    Returns:
        ValidationResult describing the first violated rule, or a valid result
    """
    for rule in RULES[kind]:
        if partial and rule.field not in record:
            continue

        value = record.get(rule.field)
        if value is None and not rule.required:
            continue
        if value is None and not partial:
            return ValidationResult.fail(rule.field, f'"{rule.field}" is required')

        message = _check(rule, value)
        if message is not None:
            return ValidationResult.fail(rule.field, message)

    return ValidationResult.ok()


def validate_client_input(record: Mapping[str, Any]) -> ValidationResult:
    return validate_input(EntityKind.CLIENT, record)


def validate_project_input(record: Mapping[str, Any], partial: bool = False) -> ValidationResult:
    return validate_input(EntityKind.PROJECT, record, partial=partial)
