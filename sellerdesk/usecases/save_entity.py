from __future__ import annotations
from dataclasses import dataclass
from typing import Any
from ..domain.ports import EntityServicePort
from .error_mapping import map_persistence_error


@dataclass
class SaveEntity:
    service: EntityServicePort[Any]

    def __call__(self, entity: Any) -> None:
        try:
            self.service.save_or_update(entity)
        except Exception as e:
            mapped = map_persistence_error(e, default_message="Error saving object")
            if mapped is e:
                raise
            raise mapped from e
