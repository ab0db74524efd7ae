from __future__ import annotations

from typing import Any, Dict, Mapping

from ..domain.constraints import integer_field, text_field
from ..domain.entities import Department
from ..domain.formatting import format_optional_text
from ..domain.ports import DepartmentServicePort
from .entity_form_vm import EntityFormVM


class DepartmentFormVM(EntityFormVM[Department]):
    """Form session for creating or editing a department."""

    FIELDS = (
        integer_field("id", label="Id"),
        text_field("name", 30, required=True, label="Name"),
    )
    ENTITY_LABEL = "Department"

    def set_department_service(self, service: DepartmentServicePort) -> None:
        self.set_persistence_service(service)

    def _make_draft(self, raw: Mapping[str, Any]) -> Department:
        return Department(id=self._int(raw, "id"), name=self._text(raw, "name"))

    def _to_raw(self, entity: Department) -> Dict[str, str]:
        return {
            "id": format_optional_text(entity.id),
            "name": format_optional_text(entity.name),
        }


__all__ = ["DepartmentFormVM"]
