"""Errors raised by the entity REST adapter.

The entity API reports a rejected request with a JSON body such as::

    {
        "message": "Duplicate entry 'Books' for key 'name'",
        "violations": [{"field": "name", "message": "already exists"}]
    }

``violations`` is optional and may also be sent as a ``{field: message}``
mapping. The message becomes the error text; the violations become the
error's ``hint``. Bodies that are not JSON are kept as plain text.
"""

from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Sequence


class Violation(NamedTuple):
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}" if self.field else self.message


class ApiError(RuntimeError):
    """Base class for entity REST adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        violations: Sequence[Violation] = (),
    ) -> None:
        super().__init__(message)
        self.status = status
        self.violations = list(violations)

    @property
    def hint(self) -> Optional[str]:
        return format_violations(self.violations)


class ApiClientError(ApiError):
    """HTTP 4xx: the API rejected the entity (constraint violation, auth, not found)."""


class ApiServerError(ApiError):
    """HTTP 5xx from the entity API."""


class ApiTimeoutError(ApiError):
    """Timeout or connection failure after all retries."""


def parse_error_payload(resp: Any) -> Any:
    """Decoded JSON error body, the stripped text when it is not JSON, or None."""
    try:
        return resp.json()
    except ValueError:
        text = (getattr(resp, "text", "") or "").strip()
        return text[:400] or None


def error_violations(payload: Any) -> List[Violation]:
    if not isinstance(payload, dict):
        return []
    raw = payload.get("violations")
    if isinstance(raw, dict):
        return [Violation(str(field), str(message)) for field, message in raw.items() if message]
    if not isinstance(raw, list):
        return []
    found = []
    for item in raw:
        if isinstance(item, dict) and item.get("message"):
            found.append(Violation(str(item.get("field") or ""), str(item["message"])))
        elif isinstance(item, str) and item.strip():
            found.append(Violation("", item.strip()))
    return found


def format_violations(violations: Sequence[Violation]) -> Optional[str]:
    return "; ".join(str(v) for v in violations) or None


def extract_error_hint(payload: Any) -> Optional[str]:
    """Field-level details from an error body (``"name: already exists"``)."""
    return format_violations(error_violations(payload))


def build_error_message(ctx: str, status: int, payload: Any) -> str:
    detail = None
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        detail = payload["message"].strip()
    elif isinstance(payload, str):
        detail = payload
    if detail:
        return f"{ctx}: {detail} (HTTP {status})"
    return f"{ctx}: HTTP {status}"


def error_for_status(ctx: str, status: int, payload: Any) -> ApiError:
    """Typed error for a non-2xx response."""
    message = build_error_message(ctx, status, payload)
    if 400 <= status < 500:
        return ApiClientError(message, status=status, violations=error_violations(payload))
    if 500 <= status < 600:
        return ApiServerError(message, status=status)
    return ApiError(message, status=status)


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiServerError",
    "ApiTimeoutError",
    "Violation",
    "build_error_message",
    "error_for_status",
    "error_violations",
    "extract_error_hint",
    "format_violations",
    "parse_error_payload",
]
