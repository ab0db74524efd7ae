"""Input-time constraints for editable form fields.

A constraint is applied to every edit of a field: given the previous and the
proposed raw text it returns the text the field should hold. Rejected edits
keep the previous value, the same way a text widget would undo the keystroke.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_INTEGER_RE = re.compile(r"\d*")
_DECIMAL_RE = re.compile(r"\d*([.]\d*)?")
_DATE_RE = re.compile(r"[\d/.-]*")
DATE_MAX_LENGTH = 10

INTEGER = "integer"
DECIMAL = "decimal"
TEXT = "text"
DATE = "date"
REFERENCE = "reference"


@dataclass(frozen=True)
class FieldConstraint:
    """Declarative limits attached to one editable field."""

    name: str
    kind: str = TEXT
    max_length: Optional[int] = None
    required: bool = False
    label: Optional[str] = None

    def apply(self, previous: Optional[str], proposed: Optional[str]) -> str:
        old = previous or ""
        new = "" if proposed is None else str(proposed)
        if self.kind == INTEGER and not _INTEGER_RE.fullmatch(new):
            return old
        if self.kind == DECIMAL and not _DECIMAL_RE.fullmatch(new):
            return old
        if self.kind == DATE and not _DATE_RE.fullmatch(new):
            return old
        if self.max_length is not None and len(new) > self.max_length:
            return old
        return new

    @property
    def display_label(self) -> str:
        if self.label:
            return self.label
        return self.name.replace("_", " ").capitalize()


def integer_field(name: str, *, required: bool = False, label: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(name, INTEGER, required=required, label=label)


def decimal_field(name: str, *, required: bool = False, label: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(name, DECIMAL, required=required, label=label)


def text_field(
    name: str,
    max_length: Optional[int] = None,
    *,
    required: bool = False,
    label: Optional[str] = None,
) -> FieldConstraint:
    return FieldConstraint(name, TEXT, max_length=max_length, required=required, label=label)


def date_field(name: str, *, required: bool = False, label: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(name, DATE, max_length=DATE_MAX_LENGTH, required=required, label=label)


def reference_field(name: str, *, required: bool = False, label: Optional[str] = None) -> FieldConstraint:
    return FieldConstraint(name, REFERENCE, required=required, label=label)


__all__ = [
    "DATE",
    "DATE_MAX_LENGTH",
    "DECIMAL",
    "FieldConstraint",
    "INTEGER",
    "REFERENCE",
    "TEXT",
    "date_field",
    "decimal_field",
    "integer_field",
    "reference_field",
    "text_field",
]
