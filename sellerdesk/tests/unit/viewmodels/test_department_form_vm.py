from __future__ import annotations

import pytest

from sellerdesk.adapters.entity_mock import InMemoryEntityService
from sellerdesk.domain.entities import Department
from sellerdesk.domain.errors import InvalidStateError, PersistenceFailed, ValidationFailed
from sellerdesk.tests.unit.viewmodels.helpers import ExplodingService, ListenerRecorder
from sellerdesk.viewmodels.department_form_vm import DepartmentFormVM


def _new_form(service=None) -> DepartmentFormVM:
    vm = DepartmentFormVM()
    vm.set_department_service(service if service is not None else InMemoryEntityService())
    vm.bind(None)
    return vm


def test_blank_name_fails_validation_without_saving() -> None:
    service = InMemoryEntityService()
    vm = _new_form(service)

    with pytest.raises(ValidationFailed) as info:
        vm.submit({"id": "", "name": ""})

    assert info.value.errors == {"name": "Field can't be empty"}
    assert vm.errors == {"name": "Field can't be empty"}
    assert service.saved == []
    assert vm.closed is False


def test_whitespace_name_counts_as_empty() -> None:
    vm = _new_form()

    with pytest.raises(ValidationFailed) as info:
        vm.submit({"id": "3", "name": "   "})

    assert list(info.value.errors) == ["name"]


def test_submit_commits_draft_and_notifies_once() -> None:
    service = InMemoryEntityService()
    vm = _new_form(service)
    recorder = ListenerRecorder()
    vm.subscribe(recorder.listener("table"))

    committed = vm.submit({"id": "0", "name": "Books"})

    assert committed == Department(0, "Books")
    assert service.saved == [Department(0, "Books")]
    assert vm.entity == Department(0, "Books")
    assert recorder.calls == ["table"]
    assert vm.closed is True


def test_listeners_fire_in_subscription_order() -> None:
    vm = _new_form()
    recorder = ListenerRecorder()
    for name in ("first", "second", "third"):
        vm.subscribe(recorder.listener(name))

    vm.submit({"name": "Books"})

    assert recorder.calls == ["first", "second", "third"]


def test_unparsable_id_defaults_to_new_entity() -> None:
    service = InMemoryEntityService()
    vm = _new_form(service)

    vm.submit({"id": "abc", "name": "Books"})

    assert service.saved == [Department(None, "Books")]
    assert service.find_all() == [Department(1, "Books")]


def test_persistence_failure_keeps_session_open_and_entity_untouched() -> None:
    original = Department(5, "Garden")
    service = InMemoryEntityService(fail_with="Duplicate entry 'Books'")
    vm = DepartmentFormVM(service=service)
    vm.bind(original)
    recorder = ListenerRecorder()
    vm.subscribe(recorder.listener("table"))

    with pytest.raises(PersistenceFailed) as info:
        vm.submit({"id": "5", "name": "Books"})

    assert info.value.message == "Duplicate entry 'Books'"
    assert vm.entity is original
    assert vm.closed is False
    assert recorder.calls == []

    service.fail_with = None
    assert vm.submit({"id": "5", "name": "Books"}) == Department(5, "Books")
    assert recorder.calls == ["table"]


def test_unexpected_service_exception_becomes_persistence_failed() -> None:
    vm = _new_form(ExplodingService(RuntimeError("connection reset")))

    with pytest.raises(PersistenceFailed) as info:
        vm.submit({"name": "Books"})

    assert info.value.code == "PERSISTENCE_FAILED"
    assert "connection reset" in info.value.message


def test_cancel_has_no_side_effects() -> None:
    service = InMemoryEntityService()
    vm = _new_form(service)
    recorder = ListenerRecorder()
    vm.subscribe(recorder.listener("table"))
    vm.fields["name"] = ""

    vm.cancel()

    assert vm.closed is True
    assert vm.errors == {}
    assert service.saved == []
    assert recorder.calls == []


def test_submit_requires_binding_and_service() -> None:
    unbound = DepartmentFormVM(service=InMemoryEntityService())
    with pytest.raises(InvalidStateError, match="Entity was null"):
        unbound.submit({"name": "Books"})

    no_service = DepartmentFormVM()
    no_service.bind(None)
    with pytest.raises(InvalidStateError, match="Service was null"):
        no_service.submit({"name": "Books"})


def test_bind_twice_requires_reset() -> None:
    vm = DepartmentFormVM()
    vm.bind(Department(1, "Books"))

    with pytest.raises(InvalidStateError):
        vm.bind(None)

    vm.reset()
    vm.bind(None)
    assert vm.entity is None


def test_closed_session_rejects_submit_until_reset() -> None:
    vm = _new_form()
    vm.submit({"name": "Books"})

    with pytest.raises(InvalidStateError):
        vm.submit({"name": "Music"})

    vm.reset()
    vm.bind(None)
    assert vm.submit({"name": "Music"}) == Department(None, "Music")


def test_listener_cannot_reenter_submit() -> None:
    vm = _new_form()
    seen = []

    def reenter() -> None:
        with pytest.raises(InvalidStateError):
            vm.submit({"name": "Again"})
        seen.append("checked")

    vm.subscribe(reenter)
    vm.submit({"name": "Books"})

    assert seen == ["checked"]


def test_populate_requires_bound_entity() -> None:
    vm = _new_form()

    with pytest.raises(InvalidStateError):
        vm.populate_from_entity()


def test_populate_then_submit_round_trips() -> None:
    service = InMemoryEntityService()
    original = Department(3, "Fashion")
    vm = DepartmentFormVM(service=service)
    vm.bind(original)

    raw = vm.populate_from_entity()
    vm.submit(raw)

    assert raw == {"id": "3", "name": "Fashion"}
    assert service.saved == [original]


def test_edit_applies_input_constraints() -> None:
    vm = _new_form()

    assert vm.edit("id", "12") == "12"
    assert vm.edit("id", "12x") == "12"
    assert vm.edit("name", "x" * 31) == ""
    assert vm.edit("name", "Books") == "Books"
    assert vm.fields == {"id": "12", "name": "Books"}
    with pytest.raises(KeyError):
        vm.edit("email", "a@b.c")


def test_submit_without_arguments_uses_edited_fields() -> None:
    service = InMemoryEntityService()
    vm = _new_form(service)
    vm.edit("name", "Toys")

    vm.submit()

    assert service.saved == [Department(None, "Toys")]


def test_strict_numbers_reports_invalid_id() -> None:
    vm = DepartmentFormVM(service=InMemoryEntityService(), strict_numbers=True)
    vm.bind(None)

    with pytest.raises(ValidationFailed) as info:
        vm.submit({"id": "x1", "name": ""})

    assert info.value.errors == {"name": "Field can't be empty", "id": "Invalid number"}
