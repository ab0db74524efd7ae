"""Desktop entrypoint: open a department or seller form dialog.

Usage::

    python -m sellerdesk.app.main department
    python -m sellerdesk.app.main seller --backend local --settings settings.json
"""

from __future__ import annotations

import argparse
import logging
import tkinter as tk
from tkinter import messagebox
from typing import List, Optional

from ..utils.logging import configure_logging
from ..viewmodels.entity_form_vm import EntityFormVM
from ..viewmodels.entity_list_vm import EntityListVM, department_list_vm, seller_list_vm
from .controller import AppController
from .form_controller import EntityFormController
from .settings import BACKENDS, load_settings, settings_from_dict
from .views.entity_form_dialog import EntityFormDialog

log = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sellerdesk", description="Edit departments and sellers.")
    parser.add_argument("entity", choices=("department", "seller"))
    parser.add_argument("--settings", default=None, help="Path to a JSON settings file.")
    parser.add_argument("--backend", choices=BACKENDS, default=None)
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _log_rows(rows: List[dict]) -> None:
    log.info("list now has %d rows", len(rows))


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.debug)
    settings = load_settings(args.settings)
    overrides = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.debug:
        overrides["debug_logging"] = True
    if overrides:
        settings = settings_from_dict(overrides, settings)
    level = configure_logging(settings.debug_logging)
    log.debug("log level %s, backend %s", logging.getLevelName(level), settings.backend)

    controller = AppController(settings)
    vm: EntityFormVM
    listing: EntityListVM
    if args.entity == "department":
        vm = controller.build_department_form()
        listing = department_list_vm(controller.department_service, on_rows_changed=_log_rows)
        title, options = "Department data", {}
    else:
        vm = controller.build_seller_form()
        listing = seller_list_vm(
            controller.seller_service,
            date_format=settings.date_format,
            on_rows_changed=_log_rows,
        )
        title, options = "Seller data", {"department": vm.department_options}
    listing.attach(vm)

    root = tk.Tk()
    root.withdraw()
    dialog = EntityFormDialog(root, title=title, fields=vm.FIELDS, options=options)
    form = EntityFormController(
        view=dialog,
        vm=vm,
        show_error=lambda title_, message: messagebox.showerror(title_, message, parent=dialog),
    )
    dialog.set_callbacks(on_save=form.on_save, on_cancel=form.on_cancel, on_edit=form.on_edit)
    form.show()

    root.wait_window(dialog)
    root.destroy()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
