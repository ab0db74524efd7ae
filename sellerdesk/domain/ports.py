from __future__ import annotations

from typing import Callable, List, Protocol, TypeVar

from .entities import Department, Seller

E = TypeVar("E")

DataChangeListener = Callable[[], None]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class PersistenceError(RuntimeError):
    """Raised by storage adapters when an entity cannot be read or written."""


# ---- Ports (Hexagonal boundaries) ----
class EntityServicePort(Protocol[E]):
    """Save and query operations of a persistence service for one entity kind."""

    def save_or_update(self, entity: E) -> None: ...
    def find_all(self) -> List[E]: ...


class DepartmentServicePort(EntityServicePort[Department], Protocol):
    """Persistence service for departments."""


class SellerServicePort(EntityServicePort[Seller], Protocol):
    """Persistence service for sellers."""
