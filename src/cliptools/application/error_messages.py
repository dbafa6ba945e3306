"""User-friendly error messages for Pydantic validation errors.

Belongs to the Application layer — translates Pydantic machine errors on
request DTOs and settings into short, user-facing messages.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from cliptools.domain.errors import ArgumentError

# Maps (field, error_type) → message
_ERROR_MAP: dict[tuple[str, str], str] = {
    ("binary", "enum"): "Invalid binary policy. Expected one of: auto, always, never.",
    ("system_type_name", "string_too_short"): "System type name must not be empty.",
    ("color", "enum"): "Invalid color setting. Expected one of: auto, always, never.",
    ("backend", "enum"): (
        "Invalid backend. Expected one of: auto, wayland, x11, macos, windows."
    ),
    ("timeout_seconds", "greater_than_equal"): "Timeout must be at least 0.1 seconds.",
    ("timeout_seconds", "less_than_equal"): "Timeout must be at most 60 seconds.",
}


def friendly_error(
    field: str,
    error_type: str,
    fallback: str | None = None,
) -> str:
    """Return a user-friendly error message.

    Args:
        field: The Pydantic field name that failed validation.
        error_type: The Pydantic error type string (e.g., ``enum``).
        fallback: Fallback message if no mapping exists.

    Returns:
        A user-friendly error string.
    """
    message = _ERROR_MAP.get((field, error_type))
    if message:
        return message
    return fallback or f"Validation error on field '{field}'."


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Convert a list of Pydantic error dicts to user-friendly messages.

    Args:
        errors: Output of ``ValidationError.errors()``.

    Returns:
        List of user-friendly error strings.
    """
    result: list[str] = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get("loc", []))
        error_type = err.get("type", "")
        result.append(friendly_error(field, error_type, fallback=err.get("msg")))
    return result


def as_argument_error(exc: ValidationError) -> ArgumentError:
    """Wrap a request validation failure as a single-line :class:`ArgumentError`."""
    return ArgumentError("; ".join(format_validation_errors(exc.errors())))
