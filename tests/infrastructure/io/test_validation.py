"""Tests for upstream payload validation."""

from __future__ import annotations

import json

import pytest

from employee_gateway.domain.employees import EmployeeRecord, NewEmployee
from employee_gateway.infrastructure.io.validation import (
    IncomingDataError,
    create_request_body,
    delete_request_body,
    parse_delete_response,
    parse_employee,
    parse_employee_list_response,
    parse_employee_response,
)
from tests.fakes import employee_payload


def _envelope(data: object) -> bytes:
    return json.dumps({"data": data, "status": "Successfully processed request."}).encode()


def test_parse_employee_maps_upstream_field_names() -> None:
    payload = employee_payload("e-1", "Ada Lovelace", salary=185_000, age=36, title="Engineer")

    assert parse_employee(payload) == EmployeeRecord(
        id="e-1",
        name="Ada Lovelace",
        salary=185_000,
        age=36,
        title="Engineer",
        email="ada@company.com",
    )


def test_parse_employee_list_response_preserves_order() -> None:
    payload = _envelope([employee_payload("b", "Bob Jones"), employee_payload("a", "Al Smith")])

    records = parse_employee_list_response(payload)

    assert isinstance(records, tuple)
    assert [item.id for item in records] == ["b", "a"]


def test_parse_employee_list_response_accepts_empty_list() -> None:
    assert parse_employee_list_response(_envelope([])) == ()


def test_parse_employee_response_reads_data() -> None:
    record = parse_employee_response(_envelope(employee_payload("e-9", "Zed Alpha")))

    assert record.id == "e-9"


@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b'{"status": "ok"}',
        b'{"data": null}',
        _envelope([{"id": "e-1"}]),
        _envelope({"id": "e-1", "employee_name": "Ada"}),
    ],
)
def test_unreadable_payloads_raise_incoming_data_error(payload: bytes) -> None:
    with pytest.raises(IncomingDataError):
        parse_employee_list_response(payload)


def test_negative_salary_is_rejected() -> None:
    with pytest.raises(IncomingDataError):
        parse_employee(employee_payload("e-1", "Ada Lovelace", salary=-1))


def test_non_positive_age_is_rejected() -> None:
    with pytest.raises(IncomingDataError):
        parse_employee(employee_payload("e-1", "Ada Lovelace", age=0))


def test_parse_delete_response_reads_flag() -> None:
    assert parse_delete_response(_envelope(True)) is True
    assert parse_delete_response(_envelope(False)) is False


def test_parse_delete_response_without_flag_is_rejected() -> None:
    with pytest.raises(IncomingDataError):
        parse_delete_response(b'{"status": "ok"}')


def test_request_bodies_use_upstream_shape() -> None:
    new_employee = NewEmployee(name="Ada Lovelace", salary=1, age=36, title="Engineer")

    assert create_request_body(new_employee) == {
        "name": "Ada Lovelace",
        "salary": 1,
        "age": 36,
        "title": "Engineer",
    }
    assert delete_request_body("Ada Lovelace") == {"name": "Ada Lovelace"}
