from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

from ...domain.constraints import REFERENCE, FieldConstraint
from .view_utils import option_index, option_key_at, safe_call


class EntityFormDialog(tk.Toplevel):
    """Modal dialog with one entry per field and a message label under each (UI-only)."""

    OnVoid = Optional[Callable[[], None]]
    OnEdit = Optional[Callable[[str, str], str]]

    def __init__(
        self,
        parent: tk.Misc,
        *,
        title: str,
        fields: Sequence[FieldConstraint],
        options: Optional[Mapping[str, Sequence[Tuple[str, str]]]] = None,
        on_save: OnVoid = None,
        on_cancel: OnVoid = None,
        on_edit: OnEdit = None,
    ) -> None:
        super().__init__(parent)
        self.title(title)
        self.transient(parent)
        self.resizable(False, False)

        self._fields = list(fields)
        self._options: Dict[str, Sequence[Tuple[str, str]]] = dict(options or {})
        self._on_save = on_save
        self._on_cancel = on_cancel
        self._on_edit = on_edit
        self._applying = False
        self._combos: Dict[str, ttk.Combobox] = {}

        self.protocol("WM_DELETE_WINDOW", lambda: safe_call(self._on_cancel))

        self.value_vars: Dict[str, tk.StringVar] = {f.name: tk.StringVar(value="") for f in self._fields}
        self.error_vars: Dict[str, tk.StringVar] = {f.name: tk.StringVar(value="") for f in self._fields}

        self._build_ui()
        self.update_idletasks()
        self.grab_set()
        self.focus_set()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        body = ttk.Frame(self, padding=8)
        body.grid(row=0, column=0, sticky="nsew")
        body.columnconfigure(1, weight=1)

        for row, spec in enumerate(self._fields):
            ttk.Label(body, text=spec.display_label).grid(row=row, column=0, sticky="w", padx=(0, 8), pady=3)
            var = self.value_vars[spec.name]
            if spec.kind == REFERENCE:
                labels = [label for _, label in self._options.get(spec.name, ())]
                widget = ttk.Combobox(body, textvariable=var, values=labels, state="readonly", width=30)
                self._combos[spec.name] = widget
            else:
                widget = ttk.Entry(body, textvariable=var, width=32)
                if spec.name == "id":
                    widget.state(["disabled"])
                var.trace_add("write", lambda *_args, name=spec.name: self._edited(name))
            widget.grid(row=row, column=1, sticky="ew", pady=3)
            ttk.Label(body, textvariable=self.error_vars[spec.name], foreground="#b42318").grid(
                row=row, column=2, sticky="w", padx=(8, 0)
            )

        buttons = ttk.Frame(self, padding=(8, 0, 8, 8))
        buttons.grid(row=1, column=0, sticky="e")
        ttk.Button(buttons, text="Save", command=lambda: safe_call(self._on_save)).pack(side="left")
        ttk.Button(buttons, text="Cancel", command=lambda: safe_call(self._on_cancel)).pack(
            side="left", padx=(8, 0)
        )

    def set_callbacks(
        self,
        *,
        on_save: OnVoid = None,
        on_cancel: OnVoid = None,
        on_edit: OnEdit = None,
    ) -> None:
        self._on_save = on_save
        self._on_cancel = on_cancel
        self._on_edit = on_edit

    def _edited(self, name: str) -> None:
        if self._applying or self._on_edit is None:
            return
        var = self.value_vars[name]
        proposed = var.get()
        accepted = self._on_edit(name, proposed)
        if accepted != proposed:
            self._applying = True
            try:
                var.set(accepted)
            finally:
                self._applying = False

    # ------------------------------------------------------------------
    # FormView
    # ------------------------------------------------------------------
    def raw_values(self) -> Dict[str, str]:
        raw = {name: var.get() for name, var in self.value_vars.items()}
        for name, combo in self._combos.items():
            raw[name] = option_key_at(self._options.get(name, ()), combo.current())
        return raw

    def set_values(self, raw: Mapping[str, str]) -> None:
        self._applying = True
        try:
            for name, var in self.value_vars.items():
                value = raw.get(name, "") or ""
                combo = self._combos.get(name)
                if combo is None:
                    var.set(value)
                    continue
                index = option_index(self._options.get(name, ()), value)
                if index >= 0:
                    combo.current(index)
                else:
                    var.set("")
        finally:
            self._applying = False

    def set_errors(self, errors: Mapping[str, str]) -> None:
        for name, var in self.error_vars.items():
            var.set(errors.get(name, ""))

    def close(self) -> None:
        self.grab_release()
        self.destroy()


__all__ = ["EntityFormDialog"]
