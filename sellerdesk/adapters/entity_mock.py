from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Generic, List, Optional, TypeVar

from sellerdesk.domain.entities import Department, Seller
from sellerdesk.domain.ports import PersistenceError

E = TypeVar("E", Department, Seller)


def upsert_entity(entities: List[E], entity: E) -> List[E]:
    """Return ``entities`` with ``entity`` inserted or replaced by id.

    New entities (``id is None``) get the next free id, like an
    auto-increment column would assign it.
    """
    records = list(entities)
    if entity.id is None:
        next_id = max((item.id for item in records if item.id is not None), default=0) + 1
        records.append(replace(entity, id=next_id))
        return records
    for idx, item in enumerate(records):
        if item.id == entity.id:
            records[idx] = entity
            return records
    records.append(entity)
    return records


def sorted_by_name(entities: List[E]) -> List[E]:
    return sorted(entities, key=lambda item: ((item.name or "").lower(), item.id or 0))


@dataclass
class InMemoryEntityService(Generic[E]):
    """List-backed entity service used for tests and offline development.

    ``fail_with`` makes every ``save_or_update`` raise ``PersistenceError``
    with that message, which is how storage failures are simulated.
    """

    entities: List[E] = field(default_factory=list)
    fail_with: Optional[str] = None
    saved: List[E] = field(default_factory=list)

    def save_or_update(self, entity: E) -> None:
        self.saved.append(entity)
        if self.fail_with is not None:
            raise PersistenceError(self.fail_with)
        self.entities = upsert_entity(self.entities, entity)

    def find_all(self) -> List[E]:
        return sorted_by_name(self.entities)


def demo_departments() -> List[Department]:
    return [
        Department(1, "Computers"),
        Department(2, "Electronics"),
        Department(3, "Fashion"),
        Department(4, "Books"),
    ]


def demo_services() -> tuple[InMemoryEntityService[Department], InMemoryEntityService[Seller]]:
    departments: InMemoryEntityService[Any] = InMemoryEntityService(entities=demo_departments())
    sellers: InMemoryEntityService[Any] = InMemoryEntityService()
    return departments, sellers


__all__ = ["InMemoryEntityService", "demo_departments", "demo_services", "sorted_by_name", "upsert_entity"]
