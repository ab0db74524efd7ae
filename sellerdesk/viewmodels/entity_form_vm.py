"""Entity form session: raw field store, validation, commit and notification.

Call context:
    ``DepartmentFormVM`` and ``SellerFormVM`` subclass :class:`EntityFormVM`
    and supply their field list plus the draft/raw conversions. The Tkinter
    ``EntityFormController`` drives ``submit``/``cancel`` from dialog buttons,
    and list view models subscribe to be refreshed after each commit.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

from ..domain.constraints import DATE, DECIMAL, INTEGER, FieldConstraint
from ..domain.errors import InvalidStateError, PersistenceFailed, ValidationFailed
from ..domain.formatting import (
    DEFAULT_DATE_FORMAT,
    try_parse_date,
    try_parse_float,
    try_parse_int,
)
from ..domain.ports import DataChangeListener, EntityServicePort
from ..domain.validation import INVALID_NUMBER_MESSAGE, is_blank, required_field_errors
from ..usecases.save_entity import SaveEntity

E = TypeVar("E")


class EntityFormVM(Generic[E]):
    """Edit-validate-save cycle for one entity, independent of any toolkit.

    The session is single use: after a successful ``submit`` or a ``cancel``
    it is closed until ``reset`` is called.
    """

    FIELDS: Tuple[FieldConstraint, ...] = ()
    ENTITY_LABEL = "Entity"

    def __init__(
        self,
        *,
        service: Optional[EntityServicePort[E]] = None,
        strict_numbers: bool = False,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        self._log = logging.getLogger(f"{__name__}.{type(self).__name__}")
        self.service = service
        self.strict_numbers = strict_numbers
        self.date_format = date_format

        self.entity: Optional[E] = None
        self.fields: Dict[str, str] = {spec.name: "" for spec in self.FIELDS}
        self.errors: Dict[str, str] = {}
        self.closed = False

        self._bound = False
        self._submitting = False
        self._listeners: List[DataChangeListener] = []

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------
    def bind(self, entity: Optional[E]) -> None:
        """Attach ``entity`` for editing, or ``None`` to create a new one."""
        if self._bound:
            raise InvalidStateError(f"{self.ENTITY_LABEL} form is already bound")
        self.entity = entity
        self._bound = True
        self._log.debug("bound %s", "new entity" if entity is None else entity)

    def reset(self) -> None:
        self.entity = None
        self.fields = {spec.name: "" for spec in self.FIELDS}
        self.errors = {}
        self.closed = False
        self._bound = False

    def set_persistence_service(self, service: EntityServicePort[E]) -> None:
        self.service = service

    def subscribe(self, listener: DataChangeListener) -> None:
        if not callable(listener):
            raise TypeError("listener must be callable")
        self._listeners.append(listener)

    @property
    def is_bound(self) -> bool:
        return self._bound

    @property
    def field_specs(self) -> Dict[str, FieldConstraint]:
        return {spec.name: spec for spec in self.FIELDS}

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def edit(self, field_id: str, value: Any) -> str:
        """Apply the field's input constraint and store the accepted text."""
        spec = self.field_specs.get(field_id)
        if spec is None:
            raise KeyError(f"Unknown field: {field_id}")
        accepted = spec.apply(self.fields.get(field_id, ""), value)
        self.fields[field_id] = accepted
        return accepted

    def submit(self, raw_values: Optional[Mapping[str, Any]] = None) -> E:
        """Validate the raw values, persist the draft and notify listeners.

        Returns:
            The committed entity.

        Raises:
            InvalidStateError: Session unbound, closed, without a service, or
                already inside ``submit``.
            ValidationFailed: One or more fields are invalid; nothing is saved.
            PersistenceFailed: The service could not store the draft.
        """
        self._ensure_can_submit()
        self._submitting = True
        try:
            raw = dict(self.fields if raw_values is None else raw_values)
            self.fields = {key: "" if value is None else value for key, value in raw.items()}

            draft = self._make_draft(raw)
            errors = self._validate(raw)
            self.errors = errors
            if errors:
                self._log.debug("validation failed for fields %s", sorted(errors))
                raise ValidationFailed(errors)

            try:
                SaveEntity(self.service)(draft)
            except PersistenceFailed as exc:
                self._log.warning("save failed: %s", exc.message)
                raise

            self.entity = draft
            self.closed = True
            self._log.info("%s saved: %s", self.ENTITY_LABEL, draft)
            self._notify_data_change_listeners()
            return draft
        finally:
            self._submitting = False

    def cancel(self) -> None:
        self.closed = True
        self._log.debug("%s form cancelled", self.ENTITY_LABEL)

    def populate_from_entity(self) -> Dict[str, str]:
        """Copy the bound entity into the raw field store using display formats."""
        if self.entity is None:
            raise InvalidStateError("Entity was null")
        self.fields = self._to_raw(self.entity)
        self.errors = {}
        return dict(self.fields)

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------
    def _make_draft(self, raw: Mapping[str, Any]) -> E:
        raise NotImplementedError

    def _to_raw(self, entity: E) -> Dict[str, str]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _ensure_can_submit(self) -> None:
        if not self._bound:
            raise InvalidStateError("Entity was null")
        if self.service is None:
            raise InvalidStateError("Service was null")
        if self._submitting:
            raise InvalidStateError(f"{self.ENTITY_LABEL} form is already submitting")
        if self.closed:
            raise InvalidStateError(f"{self.ENTITY_LABEL} form is closed")

    def _validate(self, raw: Mapping[str, Any]) -> Dict[str, str]:
        errors = required_field_errors(
            (spec.name, self._presence_value(spec, raw.get(spec.name)))
            for spec in self.FIELDS
            if spec.required
        )
        if self.strict_numbers:
            for spec in self.FIELDS:
                if spec.kind not in (INTEGER, DECIMAL) or spec.name in errors:
                    continue
                value = raw.get(spec.name)
                if is_blank(value):
                    continue
                parse = try_parse_int if spec.kind == INTEGER else try_parse_float
                if parse(value) is None:
                    errors[spec.name] = INVALID_NUMBER_MESSAGE
        return errors

    def _presence_value(self, spec: FieldConstraint, value: Any) -> Any:
        # an unparsable date counts as no date
        if spec.kind == DATE:
            return try_parse_date(value, self.date_format)
        return value

    def _notify_data_change_listeners(self) -> None:
        for listener in list(self._listeners):
            listener()

    @staticmethod
    def _text(raw: Mapping[str, Any], name: str) -> Optional[str]:
        value = raw.get(name)
        return None if value is None else str(value)

    @staticmethod
    def _int(raw: Mapping[str, Any], name: str) -> Optional[int]:
        return try_parse_int(raw.get(name))

    @staticmethod
    def _decimal(raw: Mapping[str, Any], name: str) -> Optional[float]:
        value = raw.get(name)
        if is_blank(value):
            return None
        parsed = try_parse_float(value)
        return 0.0 if parsed is None else parsed

    def _date(self, raw: Mapping[str, Any], name: str):
        return try_parse_date(raw.get(name), self.date_format)


__all__ = ["EntityFormVM"]
