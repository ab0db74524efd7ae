from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, Tuple

log = logging.getLogger(__name__)


def safe_call(
    fn: Optional[Callable[..., Any]],
    *args: Any,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> None:
    """Invoke a view callback, reporting failures instead of killing the Tk loop."""
    if fn is None:
        return
    try:
        fn(*args)
    except Exception as exc:
        if on_error:
            on_error(exc)
        else:
            log.exception("Callback failed: %s", exc)


def option_key_at(choices: Sequence[Tuple[str, str]], index: int) -> str:
    """Key of the ``(key, label)`` choice at a combobox index; ``""`` for no selection."""
    if 0 <= index < len(choices):
        return choices[index][0]
    return ""


def option_index(choices: Sequence[Tuple[str, str]], key: str) -> int:
    """Combobox index of the first choice with ``key``, or -1."""
    for index, (choice_key, _label) in enumerate(choices):
        if choice_key == key:
            return index
    return -1


__all__ = ["option_index", "option_key_at", "safe_call"]
