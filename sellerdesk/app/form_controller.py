"""Controller connecting an entity form dialog to its form session.

The dialog only collects raw strings and renders messages; this controller
forwards its button and keystroke callbacks to the view model and routes the
outcome back: per-field messages on validation failure, an alert on storage
failure, and closing the dialog on success or cancel. A listener that fails
after the commit is reported with an alert and the dialog still closes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Protocol

from ..domain.errors import PersistenceFailed, ValidationFailed
from ..domain.ports import UseCaseError
from ..viewmodels.entity_form_vm import EntityFormVM

SAVE_ERROR_TITLE = "Error saving object"
REFRESH_ERROR_TITLE = "Saved, but refresh failed"


class FormView(Protocol):
    def raw_values(self) -> Dict[str, str]: ...
    def set_values(self, raw: Mapping[str, str]) -> None: ...
    def set_errors(self, errors: Mapping[str, str]) -> None: ...
    def close(self) -> None: ...


class EntityFormController:
    """Save/cancel orchestration for one form dialog."""

    def __init__(
        self,
        *,
        view: FormView,
        vm: EntityFormVM[Any],
        show_error: Callable[[str, str], None],
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.view = view
        self.vm = vm
        self._show_error = show_error

    def show(self) -> None:
        """Push the session's current raw values into the view."""
        self.view.set_values(self.vm.fields)
        self.view.set_errors({})

    def on_edit(self, field_id: str, value: str) -> str:
        return self.vm.edit(field_id, value)

    def on_save(self) -> Optional[Any]:
        was_closed = self.vm.closed
        try:
            committed = self.vm.submit(self.view.raw_values())
        except ValidationFailed as err:
            self.view.set_errors(err.errors)
            return None
        except PersistenceFailed as err:
            self._show_error(SAVE_ERROR_TITLE, err.message)
            return None
        except UseCaseError as err:
            # a listener failed after the commit; the session is already closed
            if was_closed or not self.vm.closed:
                raise
            self._log.warning("listener failed after save: %s", err.message)
            self._show_error(REFRESH_ERROR_TITLE, err.message)
            self.view.close()
            return self.vm.entity
        self.view.close()
        return committed

    def on_cancel(self) -> None:
        self.vm.cancel()
        self.view.close()


__all__ = ["EntityFormController", "FormView", "REFRESH_ERROR_TITLE", "SAVE_ERROR_TITLE"]
