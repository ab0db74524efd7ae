"""Translate adapter errors into user-facing persistence messages."""

from __future__ import annotations


from typing import Optional

from sellerdesk.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
)
from sellerdesk.domain.errors import PersistenceFailed
from sellerdesk.domain.ports import PersistenceError, UseCaseError


def map_persistence_error(
    exc: Exception,
    *,
    default_message: Optional[str] = None,
) -> PersistenceFailed:
    """Map storage and REST adapter exceptions to ``PersistenceFailed``.

    Args:
        exc (Exception): Exception raised by the persistence service.
        default_message (Optional[str]): Message used for unknown exceptions
            that carry no text of their own.

    Returns:
        PersistenceFailed: Error carrying a message suitable for an alert.
    """
    if isinstance(exc, PersistenceFailed):
        return exc
    if isinstance(exc, UseCaseError):
        return PersistenceFailed(exc.message, cause=exc)
    if isinstance(exc, PersistenceError):
        return PersistenceFailed(str(exc) or "Storage error.", cause=exc)
    if isinstance(exc, ApiTimeoutError):
        return PersistenceFailed("Request timed out. Check connection.", cause=exc)
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        hint = exc.hint
        if status == 409:
            return PersistenceFailed(_compose_error_message("Conflict", hint), cause=exc)
        if status == 422:
            return PersistenceFailed(_compose_error_message("Rejected by server", hint), cause=exc)
        if status in (401, 403):
            return PersistenceFailed("Auth failed / API key invalid.", cause=exc)
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return PersistenceFailed(_compose_error_message(label, hint), cause=exc)
    if isinstance(exc, ApiServerError):
        return PersistenceFailed("Server error, try again.", cause=exc)
    if isinstance(exc, ApiError):
        return PersistenceFailed(str(exc), cause=exc)

    message = str(exc) or default_message or "Unexpected error."
    return PersistenceFailed(message, cause=exc)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_persistence_error"]
