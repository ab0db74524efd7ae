"""Shared HTTP transport for the entity REST adapter.

This module wraps ``requests.Session`` so the adapter gets one timeout policy,
transport retries and API-key headers in a single place.

Dependencies:
    - ``requests`` for network I/O.
    - ``sellerdesk.adapters.api_errors.ApiTimeoutError`` for typed transport
      failures.

Call context:
    - Constructed by ``sellerdesk/adapters/entity_rest.py``.
    - Used only inside adapter methods; view models and use cases reach the
      network through the entity service port.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from sellerdesk.adapters.api_errors import ApiTimeoutError


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds for each JSON API call.
        retries: Number of retry attempts after the initial request.
    """
    request_timeout_s: int = 10
    retries: int = 2


class RetryingSession:
    """Requests wrapper with API-key headers and retry loops.

    Only timeouts and connection errors are retried. Callers decide how to map
    non-2xx responses into adapter errors.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send one request, retrying on timeout/connectivity failures.

        Raises:
            ApiTimeoutError: If all attempts fail with timeout/connection errors.
        """
        context = f"{method.upper()} {url}"
        send = getattr(self.session, method)
        last_err: ApiTimeoutError | None = None
        for _ in range(self.cfg.retries + 1):
            try:
                return send(url, timeout=self.cfg.request_timeout_s, **kwargs)
            except (req_exc.Timeout, req_exc.ConnectionError):
                last_err = ApiTimeoutError(f"{context}: timeout contacting server")
        raise last_err

    def get(self, url: str, *, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self._send("get", url, params=params, headers=self._headers())

    def post(self, url: str, *, json_body: Dict[str, Any]) -> requests.Response:
        return self._send(
            "post", url, data=json.dumps(json_body), headers=self._headers(json_body=True)
        )

    def put(self, url: str, *, json_body: Dict[str, Any]) -> requests.Response:
        return self._send(
            "put", url, data=json.dumps(json_body), headers=self._headers(json_body=True)
        )


__all__ = ["HttpConfig", "RetryingSession"]
