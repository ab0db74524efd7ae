from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..domain.constraints import (
    date_field,
    decimal_field,
    integer_field,
    reference_field,
    text_field,
)
from ..domain.entities import Department, Seller
from ..domain.errors import InvalidStateError
from ..domain.formatting import (
    format_currency,
    format_date,
    format_optional_text,
    try_parse_int,
)
from ..domain.ports import DepartmentServicePort, SellerServicePort
from ..usecases.load_entities import LoadEntities
from .entity_form_vm import EntityFormVM


class SellerFormVM(EntityFormVM[Seller]):
    """Form session for sellers, including the department selection list.

    The ``department`` raw value holds the selected department id as text.
    """

    FIELDS = (
        integer_field("id", label="Id"),
        text_field("name", 70, required=True, label="Name"),
        text_field("email", 60, required=True, label="Email"),
        date_field("birth_date", required=True, label="Birth date"),
        decimal_field("base_salary", required=True, label="Base salary"),
        reference_field("department", label="Department"),
    )
    ENTITY_LABEL = "Seller"

    def __init__(
        self,
        *,
        service: Optional[SellerServicePort] = None,
        department_service: Optional[DepartmentServicePort] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(service=service, **kwargs)
        self.department_service = department_service
        self.departments: List[Department] = []

    def set_services(
        self,
        service: SellerServicePort,
        department_service: DepartmentServicePort,
    ) -> None:
        self.set_persistence_service(service)
        self.department_service = department_service

    def load_associated_objects(self) -> List[Department]:
        """Load the departments offered by the reference selection."""
        if self.department_service is None:
            raise InvalidStateError("Service was null")
        self.departments = LoadEntities(self.department_service)()
        self._log.debug("loaded %d departments", len(self.departments))
        # new sellers start with the first department selected
        if self.entity is None and self.departments and not self.fields.get("department"):
            self.fields["department"] = format_optional_text(self.departments[0].id)
        return list(self.departments)

    @property
    def department_options(self) -> List[Tuple[str, str]]:
        """``(id, display name)`` pairs in the order the service returned them."""
        return [
            (format_optional_text(dept.id), dept.name or "")
            for dept in self.departments
        ]

    # ------------------------------------------------------------------
    def _make_draft(self, raw: Mapping[str, Any]) -> Seller:
        return Seller(
            id=self._int(raw, "id"),
            name=self._text(raw, "name"),
            email=self._text(raw, "email"),
            birth_date=self._date(raw, "birth_date"),
            base_salary=self._decimal(raw, "base_salary"),
            department=self._resolve_department(raw.get("department")),
        )

    def _to_raw(self, entity: Seller) -> Dict[str, str]:
        """Raw values for ``entity``; salary is shown with two decimals.

        A salary with more precision comes back rounded after populate and
        submit (``1234.567`` is saved as ``1234.57``).
        """
        department = entity.department
        return {
            "id": format_optional_text(entity.id),
            "name": format_optional_text(entity.name),
            "email": format_optional_text(entity.email),
            "birth_date": format_date(entity.birth_date, self.date_format),
            "base_salary": format_currency(entity.base_salary),
            "department": format_optional_text(department.id) if department else "",
        }

    def _resolve_department(self, value: Any) -> Optional[Department]:
        if isinstance(value, Department):
            return value
        dept_id = try_parse_int(value)
        if dept_id is None:
            return None
        for dept in self.departments:
            if dept.id == dept_id:
                return dept
        current = self.entity.department if self.entity is not None else None
        if current is not None and current.id == dept_id:
            return current
        return None


__all__ = ["SellerFormVM"]
