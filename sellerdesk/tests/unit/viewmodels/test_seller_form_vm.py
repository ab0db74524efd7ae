from __future__ import annotations

from datetime import date

import pytest

from sellerdesk.adapters.entity_mock import InMemoryEntityService
from sellerdesk.domain.entities import Department, Seller
from sellerdesk.domain.errors import InvalidStateError, ValidationFailed
from sellerdesk.domain.ports import UseCaseError
from sellerdesk.tests.unit.viewmodels.helpers import (
    ExplodingService,
    ListenerRecorder,
    make_department_service,
    make_seller,
    seller_raw,
)
from sellerdesk.viewmodels.seller_form_vm import SellerFormVM


def _form(entity=None, *, sellers=None, departments=None, load=True) -> SellerFormVM:
    vm = SellerFormVM()
    vm.set_services(
        sellers if sellers is not None else InMemoryEntityService(),
        departments if departments is not None else make_department_service(),
    )
    vm.bind(entity)
    if load:
        vm.load_associated_objects()
    return vm


def test_all_blank_required_fields_are_reported_together() -> None:
    sellers = InMemoryEntityService()
    vm = _form(sellers=sellers)

    with pytest.raises(ValidationFailed) as info:
        vm.submit(seller_raw(name=" ", email="", birth_date="", base_salary=""))

    assert set(info.value.errors) == {"name", "email", "birth_date", "base_salary"}
    assert set(info.value.errors.values()) == {"Field can't be empty"}
    assert sellers.saved == []


def test_unparsable_birth_date_counts_as_empty() -> None:
    vm = _form()

    with pytest.raises(ValidationFailed) as info:
        vm.submit(seller_raw(birth_date="31/02/1990"))

    assert info.value.errors == {"birth_date": "Field can't be empty"}


def test_department_reference_is_optional() -> None:
    sellers = InMemoryEntityService()
    vm = _form(sellers=sellers)

    committed = vm.submit(seller_raw(department=""))

    assert committed.department is None
    assert sellers.saved == [committed]


def test_valid_submit_builds_typed_seller_and_notifies() -> None:
    sellers = InMemoryEntityService()
    vm = _form(sellers=sellers)
    recorder = ListenerRecorder()
    vm.subscribe(recorder.listener("list"))
    vm.subscribe(recorder.listener("status"))

    committed = vm.submit(seller_raw())

    assert committed == Seller(
        id=None,
        name="Alex Grey",
        email="alex@example.com",
        birth_date=date(1985, 2, 10),
        base_salary=2500.0,
        department=Department(1, "Computers"),
    )
    assert recorder.calls == ["list", "status"]


def test_unparsable_salary_defaults_to_zero() -> None:
    sellers = InMemoryEntityService()
    vm = _form(sellers=sellers)

    committed = vm.submit(seller_raw(base_salary="12a"))

    assert committed.base_salary == 0.0


def test_strict_numbers_rejects_unparsable_salary() -> None:
    vm = SellerFormVM(strict_numbers=True)
    vm.set_services(InMemoryEntityService(), make_department_service())
    vm.bind(None)

    with pytest.raises(ValidationFailed) as info:
        vm.submit(seller_raw(base_salary="12a"))

    assert info.value.errors == {"base_salary": "Invalid number"}


def test_populate_then_submit_reproduces_bound_seller() -> None:
    original = make_seller()
    sellers = InMemoryEntityService()
    vm = _form(original, sellers=sellers)

    raw = vm.populate_from_entity()
    vm.submit(raw)

    assert raw == {
        "id": "1",
        "name": "Bob Brown",
        "email": "bob@example.com",
        "birth_date": "21/04/1998",
        "base_salary": "1000.00",
        "department": "2",
    }
    assert sellers.saved == [original]


def test_round_trip_without_loaded_departments_keeps_department() -> None:
    original = make_seller(department=Department(9, "Archive"))
    sellers = InMemoryEntityService()
    vm = _form(original, sellers=sellers, load=False)

    vm.submit(vm.populate_from_entity())

    assert sellers.saved == [original]


def test_seller_without_department_round_trips_unassigned() -> None:
    original = make_seller(department=None)
    sellers = InMemoryEntityService()
    vm = _form(original, sellers=sellers)

    raw = vm.populate_from_entity()
    vm.submit(raw)

    assert raw["department"] == ""
    assert sellers.saved == [original]


def test_salary_round_trip_keeps_two_decimals() -> None:
    sellers = InMemoryEntityService()
    vm = _form(make_seller(base_salary=1234.567), sellers=sellers)

    raw = vm.populate_from_entity()
    committed = vm.submit(raw)

    assert raw["base_salary"] == "1234.57"
    assert committed.base_salary == 1234.57
    assert sellers.saved == [make_seller(base_salary=1234.57)]


def test_new_seller_preselects_first_department() -> None:
    vm = _form()

    assert vm.fields["department"] == "1"
    assert vm.department_options == [("1", "Computers"), ("2", "Electronics")]


def test_load_associated_objects_requires_department_service() -> None:
    vm = SellerFormVM(service=InMemoryEntityService())
    vm.bind(None)

    with pytest.raises(InvalidStateError, match="Service was null"):
        vm.load_associated_objects()


def test_load_associated_objects_wraps_service_errors() -> None:
    class _Broken(ExplodingService):
        def find_all(self):
            raise RuntimeError("db offline")

    vm = SellerFormVM()
    vm.set_services(InMemoryEntityService(), _Broken(RuntimeError("unused")))
    vm.bind(None)

    with pytest.raises(UseCaseError) as info:
        vm.load_associated_objects()

    assert info.value.code == "LOAD_FAILED"
    assert vm.departments == []


def test_email_and_name_length_limits() -> None:
    vm = _form()

    assert vm.edit("name", "n" * 70) == "n" * 70
    assert vm.edit("name", "n" * 71) == "n" * 70
    assert vm.edit("email", "e" * 61) == ""
    assert vm.edit("base_salary", "12.5") == "12.5"
    assert vm.edit("base_salary", "12,5") == "12.5"
