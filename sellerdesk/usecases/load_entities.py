from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List
from ..domain.ports import EntityServicePort, UseCaseError


@dataclass
class LoadEntities:
    service: EntityServicePort[Any]

    def __call__(self) -> List[Any]:
        try:
            return list(self.service.find_all() or [])
        except Exception as e:
            raise UseCaseError("LOAD_FAILED", str(e) or "Could not load records.")
