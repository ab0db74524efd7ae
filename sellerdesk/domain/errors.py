"""Domain-level error types raised by form sessions and use cases.

All of them derive from :class:`UseCaseError` so the presentation layer can
route them by ``code`` without knowing adapter exception types.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from .ports import UseCaseError


class InvalidStateError(UseCaseError):
    """Session used before its bindings/collaborators are set (caller bug)."""

    def __init__(self, message: str):
        super().__init__("INVALID_STATE", message)


class ValidationFailed(UseCaseError):
    """Submitted field values failed validation; carries the per-field errors."""

    def __init__(self, errors: Mapping[str, str], message: str = "Validation error"):
        super().__init__("VALIDATION_FAILED", message)
        self.errors: Dict[str, str] = dict(errors)


class PersistenceFailed(UseCaseError):
    """The persistence service rejected or could not store the draft."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__("PERSISTENCE_FAILED", message)
        self.cause = cause


__all__ = ["InvalidStateError", "PersistenceFailed", "UseCaseError", "ValidationFailed"]
