"""Employee records and the pure search/ranking rules applied to them.

Usage example:
    from employee_gateway.domain.employees import EmployeeRecord, top_paid

    records = (
        EmployeeRecord(id="1", name="Ada", salary=120, age=36, title="Eng", email="a@x.io"),
        EmployeeRecord(id="2", name="Bob", salary=90, age=41, title="Ops", email="b@x.io"),
    )
    best = top_paid(records, 1)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

type EmployeeCollection = tuple[EmployeeRecord, ...]


@dataclass(frozen=True)
class EmployeeRecord:
    """An employee as reported by the upstream service.

    Identity is ``id``. ``name`` is what the upstream deletes by and is not
    guaranteed unique.
    """

    id: str
    name: str
    salary: int
    age: int
    title: str
    email: str


@dataclass(frozen=True)
class NewEmployee:
    """Input for creating an employee; the upstream assigns id and email."""

    name: str
    salary: int
    age: int
    title: str


def find_by_id(records: Iterable[EmployeeRecord], employee_id: str) -> EmployeeRecord | None:
    """Return the first record with ``employee_id``, or None."""
    return next((record for record in records if record.id == employee_id), None)


def match_name(records: Iterable[EmployeeRecord], fragment: str) -> list[EmployeeRecord]:
    """Return records whose name contains ``fragment``, ignoring case.

    Upstream order is preserved.
    """
    needle = fragment.casefold()
    return [record for record in records if needle in record.name.casefold()]


def top_paid(records: Iterable[EmployeeRecord], count: int) -> list[EmployeeRecord]:
    """Return up to ``count`` records ordered by salary, highest first.

    Equal salaries keep upstream order. A tie straddling the cut-off is not
    expanded, so the last place is arbitrary among equals.
    """
    if count <= 0:
        return []
    return sorted(records, key=lambda record: record.salary, reverse=True)[:count]
