"""Input validation methods for certiweb.

Provides the ``ValidationMixin`` used by :class:`~certiweb.core.Certiweb`
and standalone helpers the CLI reuses. Every check runs before the
operation touches storage, so a rejected argument never costs a load.
"""

from typing import Any

from certiweb.types import MAX_RECORD_ID, MIN_RECORD_ID

MAX_TIMESTAMP = 2**64 - 1


def sanitize_record_id(value: Any, field_name: str = "id") -> int:
    """Validate a table id: an int within the 32-bit signed range."""
    # bool is an int subclass; True is not a record id.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer, got {type(value).__name__}")
    if not MIN_RECORD_ID <= value <= MAX_RECORD_ID:
        raise ValueError(
            f"{field_name} out of range ({MIN_RECORD_ID}..{MAX_RECORD_ID}), got {value}"
        )
    return value


def sanitize_timestamp(value: Any, field_name: str = "timestamp") -> int:
    """Validate a timestamp: a non-negative integer that fits in 64 bits."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_TIMESTAMP:
        raise ValueError(f"{field_name} out of range (0..{MAX_TIMESTAMP}), got {value}")
    return value


def sanitize_text(value: Any, field_name: str, max_length: int = 1000) -> str:
    """Validate a text field. Stored verbatim, empty strings allowed."""
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string, got {type(value).__name__}")
    if len(value) > max_length:
        raise ValueError(f"{field_name} too long (max {max_length} characters, got {len(value)})")
    return value


class ValidationMixin:
    """Argument validation for the registry facade."""

    max_text_length: int = 1000

    def _validate_record_id(self, value: Any, field_name: str = "id") -> int:
        return sanitize_record_id(value, field_name)

    def _validate_timestamp(self, value: Any, field_name: str = "timestamp") -> int:
        return sanitize_timestamp(value, field_name)

    def _validate_text(self, value: Any, field_name: str) -> str:
        return sanitize_text(value, field_name, self.max_text_length)
