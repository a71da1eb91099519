"""
Validation utilities for request input.
"""
import re
from typing import Any

from .error_handlers import ValidationError, get_error_message

_TODO_ID_PATTERN = re.compile(r"[0-9]+")

# Largest value the `Integer` id column can hold (signed 32-bit).
MAX_TODO_ID = 2**31 - 1


def parse_todo_id(raw: Any) -> int:
    """Parse a todo id taken from the URL path.

    Only plain base-10 digit strings (or ints) between 1 and ``MAX_TODO_ID``
    are accepted; signs, decimals, whitespace and empty values are rejected.
    """
    if isinstance(raw, bool):
        raise ValidationError(get_error_message("invalid_todo_id"), details={"id": raw})

    if isinstance(raw, int):
        value = raw
    else:
        text = raw if isinstance(raw, str) else ""
        if not _TODO_ID_PATTERN.fullmatch(text):
            raise ValidationError(get_error_message("invalid_todo_id"), details={"id": str(raw)})
        value = int(text)

    if value < 1 or value > MAX_TODO_ID:
        raise ValidationError(get_error_message("invalid_todo_id"), details={"id": str(value)})

    return value


def validate_string_field(
    value: Any,
    field_name: str,
    min_length: int = 1,
    max_length: int | None = 255,
    required: bool = True,
) -> str | None:
    """Validate a string field with common rules. ``max_length=None`` means unbounded."""
    if value is None:
        if required:
            raise ValidationError(f"{field_name} is required")
        return None

    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")

    if len(value) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")

    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field_name} must not exceed {max_length} characters")

    return value
