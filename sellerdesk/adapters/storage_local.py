from __future__ import annotations
import json, os, tempfile
from typing import Any, Callable, Generic, List, Mapping, TypeVar
from sellerdesk.domain.entities import Department, Seller
from sellerdesk.domain.ports import PersistenceError
from .entity_mock import sorted_by_name, upsert_entity

E = TypeVar("E", Department, Seller)


class StorageLocal(Generic[E]):
    """Local filesystem storage for one entity kind (JSON list file)."""

    def __init__(
        self,
        root_dir: str,
        filename: str,
        decode: Callable[[Mapping[str, Any]], E],
    ) -> None:
        self.root = root_dir
        self.path = os.path.join(root_dir, filename)
        self._decode = decode

    # ---- Port ----
    def save_or_update(self, entity: E) -> None:
        records = upsert_entity(self._load(), entity)
        self._dump([item.to_payload() for item in records])

    def find_all(self) -> List[E]:
        return sorted_by_name(self._load())

    # ---- File I/O ----
    def _load(self) -> List[E]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(payload, list):
            raise PersistenceError(f"{self.path}: expected a JSON list")
        try:
            return [self._decode(row) for row in payload]
        except (TypeError, ValueError) as exc:
            raise PersistenceError(f"{self.path}: malformed record: {exc}") from exc

    def _dump(self, rows: List[dict]) -> None:
        # write to a temp file in the same dir, then swap it in
        try:
            os.makedirs(self.root, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=os.path.basename(self.path) + "_", suffix=".tmp", dir=self.root
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(rows, f, ensure_ascii=False, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self.path}: {exc}") from exc


def department_storage(root_dir: str) -> StorageLocal[Department]:
    return StorageLocal(root_dir, "departments.json", Department.from_payload)


def seller_storage(root_dir: str) -> StorageLocal[Seller]:
    return StorageLocal(root_dir, "sellers.json", Seller.from_payload)
