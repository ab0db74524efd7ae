from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from ..domain.entities import Department, Seller
from ..domain.formatting import (
    DEFAULT_DATE_FORMAT,
    format_currency,
    format_date,
    format_optional_text,
)
from ..domain.ports import EntityServicePort
from ..usecases.load_entities import LoadEntities
from .entity_form_vm import EntityFormVM

E = TypeVar("E")

Column = Tuple[str, Callable[[Any], str]]

log = logging.getLogger(__name__)


class EntityListVM(Generic[E]):
    """Table state for one entity kind, refreshed whenever a form commits."""

    def __init__(
        self,
        service: EntityServicePort[E],
        columns: Sequence[Column],
        *,
        on_rows_changed: Optional[Callable[[List[Dict[str, str]]], None]] = None,
    ) -> None:
        self.service = service
        self.columns = list(columns)
        self.on_rows_changed = on_rows_changed
        self.entities: List[E] = []
        self.rows: List[Dict[str, str]] = []

    def refresh(self) -> List[Dict[str, str]]:
        self.entities = LoadEntities(self.service)()
        self.rows = [
            {key: render(entity) for key, render in self.columns}
            for entity in self.entities
        ]
        log.debug("list refreshed: %d rows", len(self.rows))
        if self.on_rows_changed:
            self.on_rows_changed(list(self.rows))
        return list(self.rows)

    def on_data_changed(self) -> None:
        self.refresh()

    def attach(self, form: EntityFormVM[E]) -> None:
        """Subscribe this list to ``form`` so commits trigger a refresh."""
        form.subscribe(self.on_data_changed)


def department_list_vm(service: EntityServicePort[Department], **kwargs: Any) -> EntityListVM[Department]:
    columns: List[Column] = [
        ("id", lambda d: format_optional_text(d.id)),
        ("name", lambda d: format_optional_text(d.name)),
    ]
    return EntityListVM(service, columns, **kwargs)


def seller_list_vm(
    service: EntityServicePort[Seller],
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
    **kwargs: Any,
) -> EntityListVM[Seller]:
    columns: List[Column] = [
        ("id", lambda s: format_optional_text(s.id)),
        ("name", lambda s: format_optional_text(s.name)),
        ("email", lambda s: format_optional_text(s.email)),
        ("birth_date", lambda s: format_date(s.birth_date, date_format)),
        ("base_salary", lambda s: format_currency(s.base_salary)),
        ("department", lambda s: s.department.name or "" if s.department else ""),
    ]
    return EntityListVM(service, columns, **kwargs)


__all__ = ["EntityListVM", "department_list_vm", "seller_list_vm"]
