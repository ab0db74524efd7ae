from __future__ import annotations

from datetime import date
from typing import Any, List

from sellerdesk.adapters.entity_mock import InMemoryEntityService
from sellerdesk.domain.entities import Department, Seller


class ListenerRecorder:
    """Collects the order in which named listeners fired."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def listener(self, name: str):
        return lambda: self.calls.append(name)


class ExplodingService:
    """Entity service whose save raises an arbitrary exception."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc
        self.saved: List[Any] = []

    def save_or_update(self, entity: Any) -> None:
        self.saved.append(entity)
        raise self.exc

    def find_all(self) -> List[Any]:
        return []


def make_department_service() -> InMemoryEntityService:
    return InMemoryEntityService(entities=[Department(1, "Computers"), Department(2, "Electronics")])


def make_seller(**overrides: Any) -> Seller:
    values = dict(
        id=1,
        name="Bob Brown",
        email="bob@example.com",
        birth_date=date(1998, 4, 21),
        base_salary=1000.0,
        department=Department(2, "Electronics"),
    )
    values.update(overrides)
    return Seller(**values)


def seller_raw(**overrides: str) -> dict:
    raw = {
        "id": "",
        "name": "Alex Grey",
        "email": "alex@example.com",
        "birth_date": "10/02/1985",
        "base_salary": "2500.00",
        "department": "1",
    }
    raw.update(overrides)
    return raw


__all__ = [
    "ExplodingService",
    "ListenerRecorder",
    "make_department_service",
    "make_seller",
    "seller_raw",
]
