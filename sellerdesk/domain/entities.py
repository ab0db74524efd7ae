from __future__ import annotations

"""Domain entities edited by the form sessions and stored by the services."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Department:
    """Organisational unit a seller belongs to."""

    id: Optional[int] = None
    """Storage identifier, ``None`` until the department is first saved."""

    name: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Department":
        if not isinstance(payload, Mapping):
            raise ValueError("Department payload must be a mapping.")
        raw_id = payload.get("id")
        return cls(
            id=int(raw_id) if raw_id is not None else None,
            name=payload.get("name"),
        )

    def __str__(self) -> str:
        return self.name or ""


@dataclass(frozen=True)
class Seller:
    """Sales person record with contact data, salary and department."""

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[date] = None
    base_salary: Optional[float] = None
    department: Optional[Department] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize the seller for JSON storage and REST payloads.

        Dates use ISO-8601 so stored files stay independent of the display
        pattern configured for the forms.
        """
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "base_salary": self.base_salary,
            "department": self.department.to_payload() if self.department else None,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Seller":
        if not isinstance(payload, Mapping):
            raise ValueError("Seller payload must be a mapping.")
        raw_id = payload.get("id")
        raw_birth = payload.get("birth_date")
        raw_salary = payload.get("base_salary")
        raw_department = payload.get("department")
        return cls(
            id=int(raw_id) if raw_id is not None else None,
            name=payload.get("name"),
            email=payload.get("email"),
            birth_date=date.fromisoformat(raw_birth) if raw_birth else None,
            base_salary=float(raw_salary) if raw_salary is not None else None,
            department=(
                Department.from_payload(raw_department) if raw_department else None
            ),
        )


__all__ = ["Department", "Seller"]
