"""Employee facade: public-facing operations composed from the upstream client.

Usage example:
    >>> from employee_gateway.application.employees import EmployeeService
    >>> backend = ...  # Injected EmployeeBackend from the composition root
    >>> service = EmployeeService(backend=backend)
    >>> service.top_earning_names()
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.employees import EmployeeRecord, NewEmployee, match_name, top_paid
from ..exceptions import UpstreamFailure
from ..observability import get_logger
from ..protocols import EmployeeBackend

logger = get_logger("employee_gateway.application.employees")

TOP_EARNERS_COUNT = 10


@dataclass(frozen=True)
class EmployeeService:
    """Search, ranking and delete-by-id on top of an ``EmployeeBackend``."""

    backend: EmployeeBackend

    def get_all(self) -> list[EmployeeRecord]:
        return list(self.backend.list_all())

    def search_by_name(self, fragment: str) -> list[EmployeeRecord]:
        """Return employees whose name contains ``fragment``, ignoring case."""
        matches = match_name(self.backend.list_all(), fragment)
        logger.info("Found %d employees matching name fragment %r.", len(matches), fragment)
        return matches

    def get_by_id(self, employee_id: str) -> EmployeeRecord:
        """Return one employee.

        Raises:
            UpstreamFailure: NOT_FOUND when no employee has ``employee_id``.
        """
        record = self.backend.find_by_id(employee_id)
        if record is None:
            raise UpstreamFailure.not_found(f"No employee with id={employee_id}.")
        return record

    def highest_salary(self) -> int:
        """Return the highest salary across all employees.

        Raises:
            UpstreamFailure: NOT_FOUND when the upstream has no employees.
        """
        best = top_paid(self.backend.list_all(), 1)
        if not best:
            raise UpstreamFailure.not_found("The employee service returned no employees.")
        return best[0].salary

    def top_earning_names(self, count: int = TOP_EARNERS_COUNT) -> list[str]:
        return [record.name for record in top_paid(self.backend.list_all(), count)]

    def create(self, new_employee: NewEmployee) -> EmployeeRecord:
        record = self.backend.create(new_employee)
        logger.info("Created employee name=%s id=%s.", record.name, record.id)
        return record

    def delete_by_id(self, employee_id: str) -> EmployeeRecord | None:
        """Delete the employee with ``employee_id`` and return it.

        The upstream deletes by name, so when several employees share the
        resolved name the upstream may remove a different one. Returns None
        when the id is unknown or the upstream reports nothing was deleted.
        """
        logger.info("Deleting employee with id=%s.", employee_id)
        record = self.backend.find_by_id(employee_id)
        if record is None:
            return None
        if not self.backend.delete(record.name):
            logger.warning(
                "Upstream did not delete employee name=%s id=%s.", record.name, record.id
            )
            return None
        logger.info("Deleted employee name=%s id=%s.", record.name, record.id)
        return record
