"""Root logger setup for the sellerdesk client.

The level is taken from ``SELLERDESK_LOG_LEVEL`` (a level name or number) when
it is set, otherwise DEBUG when debug logging is enabled in the settings or on
the command line, otherwise INFO.

``urllib3`` logs every connection it opens for the REST backend. It is kept at
WARNING or above unless ``SELLERDESK_LOG_LEVEL`` is set, in which case it follows
that level. ``--debug`` therefore shows form and storage activity without the
transport noise.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LEVEL_ENV_VAR = "SELLERDESK_LOG_LEVEL"
TRANSPORT_LOGGERS = ("urllib3",)

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def parse_level(value: Optional[str]) -> Optional[int]:
    """Level for a name (``"warning"``) or number (``"15"``); None if unknown."""
    text = (value or "").strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def resolve_level(debug_enabled: bool = False, *, environ: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if environ is None else environ
    forced = parse_level(env.get(LEVEL_ENV_VAR))
    if forced is not None:
        return forced
    return logging.DEBUG if debug_enabled else logging.INFO


def configure_logging(debug_enabled: bool = False, *, environ: Optional[Mapping[str, str]] = None) -> int:
    """Install the console handler once and (re)apply levels; returns the root level."""
    env = os.environ if environ is None else environ
    level = resolve_level(debug_enabled, environ=env)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)

    transport_level = level if parse_level(env.get(LEVEL_ENV_VAR)) is not None else max(level, logging.WARNING)
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return level


__all__ = ["LEVEL_ENV_VAR", "TRANSPORT_LOGGERS", "configure_logging", "parse_level", "resolve_level"]
