from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple

REQUIRED_MESSAGE = "Field can't be empty"
INVALID_NUMBER_MESSAGE = "Invalid number"


def is_blank(value: Any) -> bool:
    """Return True for ``None`` and for strings that are empty after strip."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def required_field_errors(pairs: Iterable[Tuple[str, Any]]) -> Dict[str, str]:
    """Build the error set for required fields.

    Every ``(field_name, raw_value)`` pair whose value is blank yields one
    entry keyed by the field name. All pairs are checked; the result is empty
    when every field is present.
    """
    errors: Dict[str, str] = {}
    for name, value in pairs:
        if is_blank(value) and name not in errors:
            errors[name] = REQUIRED_MESSAGE
    return errors


__all__ = [
    "INVALID_NUMBER_MESSAGE",
    "REQUIRED_MESSAGE",
    "is_blank",
    "required_field_errors",
]
