"""Boundary-neutral IO contracts for the upstream employee service.

Usage example:
    from employee_gateway.io_contracts import EmployeeIO

    employee: EmployeeIO = {
        "id": "4a3a170b-22cd-4ac2-aad1-9bb5b34a1507",
        "employee_name": "Tiger Nixon",
        "employee_salary": 320800,
        "employee_age": 61,
        "employee_title": "Vice Chair Executive Principal",
        "employee_email": "tnixon@company.com",
    }
"""

from __future__ import annotations

from typing import TypedDict


class EmployeeIO(TypedDict):
    """Upstream employee payload shape."""

    id: str
    employee_name: str
    employee_salary: int
    employee_age: int
    employee_title: str
    employee_email: str


class EmployeeListResponseIO(TypedDict):
    """Upstream ``GET /`` response envelope."""

    data: list[EmployeeIO]
    status: str


class EmployeeResponseIO(TypedDict):
    """Upstream ``GET /{id}`` and ``POST /`` response envelope."""

    data: EmployeeIO
    status: str


class DeleteEmployeeResponseIO(TypedDict):
    """Upstream ``DELETE /`` response envelope."""

    data: bool
    status: str


class CreateEmployeeRequestIO(TypedDict):
    """Upstream ``POST /`` request body."""

    name: str
    salary: int
    age: int
    title: str


class DeleteEmployeeRequestIO(TypedDict):
    """Upstream ``DELETE /`` request body."""

    name: str
