"""Domain package exports for entities, errors and ports."""

from .entities import Department, Seller
from .errors import InvalidStateError, PersistenceFailed, ValidationFailed
from .ports import (
    DataChangeListener,
    DepartmentServicePort,
    EntityServicePort,
    PersistenceError,
    SellerServicePort,
    UseCaseError,
)
from .validation import REQUIRED_MESSAGE, required_field_errors

__all__ = [
    "DataChangeListener",
    "Department",
    "DepartmentServicePort",
    "EntityServicePort",
    "InvalidStateError",
    "PersistenceError",
    "PersistenceFailed",
    "REQUIRED_MESSAGE",
    "Seller",
    "SellerServicePort",
    "UseCaseError",
    "ValidationFailed",
    "required_field_errors",
]
