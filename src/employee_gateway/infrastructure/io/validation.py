"""Pydantic-based validation helpers for inbound upstream payloads."""

from __future__ import annotations

from typing import TypedDict

from pydantic import TypeAdapter, ValidationError

from ...domain.employees import EmployeeCollection, EmployeeRecord, NewEmployee
from ...io_contracts import CreateEmployeeRequestIO, DeleteEmployeeRequestIO


class IncomingDataError(ValueError):
    """Raised when inbound data fails validation."""


class EmployeeInput(TypedDict):
    id: str
    employee_name: str
    employee_salary: int
    employee_age: int
    employee_title: str
    employee_email: str


class EmployeeListResponseInput(TypedDict, total=False):
    data: list[object]
    status: str | None


class EmployeeResponseInput(TypedDict, total=False):
    data: object
    status: str | None


class DeleteEmployeeResponseInput(TypedDict, total=False):
    data: bool
    status: str | None
    error: str | None


def validate_as[SchemaT](schema: type[SchemaT], payload: object) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_python(payload)
    except ValidationError as exc:
        message = f"Invalid payload for {schema}."
        raise IncomingDataError(message) from exc


def validate_json_as[SchemaT](schema: type[SchemaT], payload: str | bytes | bytearray) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_json(payload)
    except ValidationError as exc:
        message = f"Invalid JSON payload for {schema}."
        raise IncomingDataError(message) from exc


def _require_data(envelope: EmployeeListResponseInput | EmployeeResponseInput) -> object:
    if "data" not in envelope or envelope["data"] is None:
        raise IncomingDataError("Upstream response has no data.")
    return envelope["data"]


def parse_employee(payload: object) -> EmployeeRecord:
    employee = validate_as(EmployeeInput, payload)
    if employee["employee_salary"] < 0:
        raise IncomingDataError(f"Negative salary for employee {employee['id']}.")
    if employee["employee_age"] <= 0:
        raise IncomingDataError(f"Non-positive age for employee {employee['id']}.")
    return EmployeeRecord(
        id=employee["id"],
        name=employee["employee_name"],
        salary=employee["employee_salary"],
        age=employee["employee_age"],
        title=employee["employee_title"],
        email=employee["employee_email"],
    )


def parse_employee_list_response(payload: str | bytes) -> EmployeeCollection:
    envelope = validate_json_as(EmployeeListResponseInput, payload)
    items = validate_as(list[object], _require_data(envelope))
    return tuple(parse_employee(item) for item in items)


def parse_employee_response(payload: str | bytes) -> EmployeeRecord:
    envelope = validate_json_as(EmployeeResponseInput, payload)
    return parse_employee(_require_data(envelope))


def parse_delete_response(payload: str | bytes) -> bool:
    envelope = validate_json_as(DeleteEmployeeResponseInput, payload)
    if "data" not in envelope:
        raise IncomingDataError("Upstream delete response has no data flag.")
    return envelope["data"]


def create_request_body(new_employee: NewEmployee) -> CreateEmployeeRequestIO:
    return {
        "name": new_employee.name,
        "salary": new_employee.salary,
        "age": new_employee.age,
        "title": new_employee.title,
    }


def delete_request_body(name: str) -> DeleteEmployeeRequestIO:
    return {"name": name}
