from __future__ import annotations

"""Display formatting and lenient parsing helpers for raw form values."""

from datetime import date, datetime
from typing import Any, Optional

DEFAULT_DATE_FORMAT = "%d/%m/%Y"


def format_optional_text(value: Any) -> str:
    return "" if value is None else str(value)


def format_currency(value: Optional[float]) -> str:
    """Render an amount with two decimals and a ``.`` separator."""
    if value is None:
        return ""
    return f"{float(value):.2f}"


def format_date(value: Optional[date], date_format: str = DEFAULT_DATE_FORMAT) -> str:
    if value is None:
        return ""
    return value.strftime(date_format)


def try_parse_int(text: Any) -> Optional[int]:
    """Parse an integer; return None for blank or malformed input."""
    if text is None:
        return None
    stripped = str(text).strip()
    if not stripped:
        return None
    try:
        return int(stripped)
    except ValueError:
        return None


def try_parse_float(text: Any) -> Optional[float]:
    """Parse a decimal number; return None for blank or malformed input."""
    if text is None:
        return None
    stripped = str(text).strip()
    if not stripped:
        return None
    try:
        return float(stripped)
    except ValueError:
        return None


def try_parse_date(text: Any, date_format: str = DEFAULT_DATE_FORMAT) -> Optional[date]:
    """Parse a display date; return None for blank or malformed input."""
    if isinstance(text, datetime):
        return text.date()
    if isinstance(text, date):
        return text
    stripped = str(text or "").strip()
    if not stripped:
        return None
    try:
        return datetime.strptime(stripped, date_format).date()
    except ValueError:
        return None


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "format_currency",
    "format_date",
    "format_optional_text",
    "try_parse_date",
    "try_parse_float",
    "try_parse_int",
]
