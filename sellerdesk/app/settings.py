"""Typed runtime settings for the desktop client.

Settings come from an optional flat JSON file and are then overridden by
``SELLERDESK_*`` environment variables. Unknown keys are rejected so typos do
not silently fall back to defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from ..domain.formatting import DEFAULT_DATE_FORMAT

BACKENDS: tuple[str, ...] = ("memory", "local", "rest")
_TRUTHY = frozenset({"1", "true", "yes", "on"})

_ENV_OVERRIDES: Dict[str, str] = {
    "SELLERDESK_BACKEND": "backend",
    "SELLERDESK_DATA_DIR": "data_dir",
    "SELLERDESK_API_URL": "api_base_url",
    "SELLERDESK_API_KEY": "api_key",
    "SELLERDESK_STRICT_NUMBERS": "strict_numbers",
    "SELLERDESK_DEBUG": "debug_logging",
}


@dataclass(frozen=True)
class AppSettings:
    backend: str = "memory"
    data_dir: str = "."
    api_base_url: str = ""
    api_key: str = ""
    request_timeout_s: int = 10
    retries: int = 2
    date_format: str = DEFAULT_DATE_FORMAT
    strict_numbers: bool = False
    debug_logging: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


def settings_from_dict(payload: Mapping[str, Any], base: Optional[AppSettings] = None) -> AppSettings:
    """Apply a flat settings mapping on top of ``base`` (defaults if omitted)."""
    if not isinstance(payload, Mapping):
        raise ValueError("Settings payload must be a mapping of flat keys.")

    allowed = {f.name for f in fields(AppSettings)}
    unknown = set(payload.keys()) - allowed
    if unknown:
        raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

    updates = {key: _coerce_value(key, value) for key, value in payload.items()}
    return replace(base or AppSettings(), **updates)


def load_settings(
    path: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> AppSettings:
    """Read settings from ``path`` (if it exists) and apply env overrides."""
    settings = AppSettings()
    if path and os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            settings = settings_from_dict(json.load(f), settings)

    env = os.environ if environ is None else environ
    overrides = {key: env[var] for var, key in _ENV_OVERRIDES.items() if env.get(var)}
    if overrides:
        settings = settings_from_dict(overrides, settings)
    return settings


# ------------------------------------------------------------------
# Coercion helpers
# ------------------------------------------------------------------
def _coerce_value(key: str, raw: Any) -> Any:
    if key == "backend":
        backend = _coerce_str(raw).lower()
        if backend not in BACKENDS:
            raise ValueError(f"backend must be one of {', '.join(BACKENDS)}.")
        return backend
    if key in {"request_timeout_s", "retries"}:
        return _coerce_int(key, raw)
    if key in {"strict_numbers", "debug_logging"}:
        return _coerce_bool(raw)
    if key == "data_dir":
        return _coerce_str(raw) or "."
    if key == "date_format":
        return _coerce_str(raw) or DEFAULT_DATE_FORMAT
    return _coerce_str(raw)


def _coerce_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, (int, float)):
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    else:
        raise ValueError(f"{name} must be an integer.")
    if coerced < 0:
        raise ValueError(f"{name} must be non-negative.")
    return coerced


__all__ = ["AppSettings", "BACKENDS", "load_settings", "settings_from_dict"]
