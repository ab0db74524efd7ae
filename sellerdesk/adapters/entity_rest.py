from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

import requests

from sellerdesk.domain.entities import Department, Seller

from .api_errors import ApiError, error_for_status, parse_error_payload
from .http_client import HttpConfig, RetryingSession

E = TypeVar("E", Department, Seller)

log = logging.getLogger(__name__)


class EntityRestAdapter(Generic[E]):
    """REST implementation of the entity service port for one collection.

    ``find_all`` issues ``GET {base}/{collection}``; ``save_or_update`` posts
    new entities to the collection and puts existing ones to
    ``{base}/{collection}/{id}``.
    """

    def __init__(
        self,
        base_url: str,
        collection: str,
        decode: Callable[[Mapping[str, Any]], E],
        *,
        api_key: Optional[str] = None,
        request_timeout_s: int = 10,
        retries: int = 2,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("EntityRestAdapter requires a base URL")
        if not collection or not collection.strip():
            raise ValueError("EntityRestAdapter requires a collection name")
        self.base_url = base_url.strip().rstrip("/")
        self.collection = collection.strip().strip("/")
        self._decode = decode
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(api_key, self.cfg)

    def find_all(self) -> List[E]:
        ctx = f"find_all[{self.collection}]"
        resp = self.session.get(self._make_url())
        self._ensure_ok(resp, ctx)
        data = self._json_any(resp, ctx)
        if isinstance(data, dict) and isinstance(data.get("items"), list):
            data = data["items"]
        if not isinstance(data, list):
            raise ApiError(f"{ctx}: expected list response")
        return [self._decode(entry) for entry in data if isinstance(entry, dict)]

    def save_or_update(self, entity: E) -> None:
        payload: Dict[str, Any] = entity.to_payload()
        if entity.id is None:
            ctx = f"insert[{self.collection}]"
            resp = self.session.post(self._make_url(), json_body=payload)
        else:
            ctx = f"update[{self.collection}:{entity.id}]"
            resp = self.session.put(self._make_url(str(entity.id)), json_body=payload)
        self._ensure_ok(resp, ctx)
        log.debug("%s: stored", ctx)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _make_url(self, *parts: str) -> str:
        path = "/".join((self.collection, *parts))
        return f"{self.base_url}/{path}"

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        raise error_for_status(ctx, resp.status_code, parse_error_payload(resp))

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            snippet = getattr(resp, "text", "")[:400]
            raise ApiError(f"{ctx}: invalid JSON response: {snippet}") from exc


def department_rest_adapter(base_url: str, **kwargs: Any) -> EntityRestAdapter[Department]:
    return EntityRestAdapter(base_url, "departments", Department.from_payload, **kwargs)


def seller_rest_adapter(base_url: str, **kwargs: Any) -> EntityRestAdapter[Seller]:
    return EntityRestAdapter(base_url, "sellers", Seller.from_payload, **kwargs)


__all__ = ["EntityRestAdapter", "department_rest_adapter", "seller_rest_adapter"]
