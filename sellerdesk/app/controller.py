"""Service and view-model wiring for the desktop app runtime.

This module owns lazy construction of the entity services selected by
:class:`sellerdesk.app.settings.AppSettings` and builds ready-to-use form
sessions on top of them. It is invoked by ``sellerdesk.app.main`` before a
dialog is shown.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..adapters.entity_mock import demo_services
from ..adapters.entity_rest import department_rest_adapter, seller_rest_adapter
from ..adapters.storage_local import department_storage, seller_storage
from ..domain.entities import Department, Seller
from ..domain.ports import DepartmentServicePort, SellerServicePort
from ..viewmodels.department_form_vm import DepartmentFormVM
from ..viewmodels.seller_form_vm import SellerFormVM
from .settings import AppSettings


class AppController:
    """Create and cache entity services, and build form sessions from them.

    Call chain:
        ``sellerdesk.app.main`` creates one instance per process and asks it
        for a department or seller form before opening the dialog.
    """

    def __init__(self, settings: AppSettings) -> None:
        self.settings = settings
        self._log = logging.getLogger(__name__)
        self._department_service: Optional[DepartmentServicePort] = None
        self._seller_service: Optional[SellerServicePort] = None

    def reset(self) -> None:
        """Drop cached services so the next access rebuilds them from settings."""
        self._department_service = None
        self._seller_service = None

    @property
    def department_service(self) -> DepartmentServicePort:
        self._ensure_services()
        assert self._department_service is not None
        return self._department_service

    @property
    def seller_service(self) -> SellerServicePort:
        self._ensure_services()
        assert self._seller_service is not None
        return self._seller_service

    def _ensure_services(self) -> None:
        if self._department_service is not None and self._seller_service is not None:
            return
        self._department_service, self._seller_service = self._build_services()
        self._log.info("using %s backend", self.settings.backend)

    def _build_services(self) -> Tuple[DepartmentServicePort, SellerServicePort]:
        backend = self.settings.backend
        if backend == "memory":
            return demo_services()
        if backend == "local":
            root = self.settings.data_dir
            return department_storage(root), seller_storage(root)
        if backend == "rest":
            if not self.settings.api_base_url:
                raise ValueError("api_base_url is required for the rest backend")
            options = dict(
                api_key=self.settings.api_key or None,
                request_timeout_s=self.settings.request_timeout_s,
                retries=self.settings.retries,
            )
            return (
                department_rest_adapter(self.settings.api_base_url, **options),
                seller_rest_adapter(self.settings.api_base_url, **options),
            )
        raise ValueError(f"Unsupported backend: {backend}")

    # ------------------------------------------------------------------
    def build_department_form(self, department: Optional[Department] = None) -> DepartmentFormVM:
        vm = DepartmentFormVM(
            strict_numbers=self.settings.strict_numbers,
            date_format=self.settings.date_format,
        )
        vm.set_department_service(self.department_service)
        vm.bind(department)
        if department is not None:
            vm.populate_from_entity()
        return vm

    def build_seller_form(self, seller: Optional[Seller] = None) -> SellerFormVM:
        vm = SellerFormVM(
            strict_numbers=self.settings.strict_numbers,
            date_format=self.settings.date_format,
        )
        vm.set_services(self.seller_service, self.department_service)
        vm.bind(seller)
        vm.load_associated_objects()
        if seller is not None:
            vm.populate_from_entity()
        return vm


__all__ = ["AppController"]
