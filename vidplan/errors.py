"""Error kinds raised by the plan generator and their serialisable form."""
from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN = "UNKNOWN"


class InvalidInput(ValueError):
    """The options record cannot produce a plan (empty topic, malformed fields)."""

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = list(fields or [])


def error_payload(error: Exception) -> dict:
    """Map an exception to the ``{"error", "category", "hint"}`` dict shells return."""
    if isinstance(error, InvalidInput):
        if error.fields == ["topic"]:
            hint = "Provide a non-empty topic"
        elif error.fields:
            hint = "Check the fields: " + ", ".join(error.fields)
        else:
            hint = "Send the options as a single object with at least a topic"
        return {
            "error": str(error),
            "category": ErrorCategory.INVALID_INPUT.value,
            "hint": hint,
            "fields": error.fields,
        }
    return {
        "error": str(error),
        "category": ErrorCategory.UNKNOWN.value,
        "hint": "Unexpected failure while generating the plan",
        "fields": [],
    }
