"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces the gateway components depend on,
enabling isolated unit testing with fake implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .domain.employees import EmployeeCollection, EmployeeRecord, NewEmployee
from .exceptions import UpstreamFailure


@runtime_checkable
class SnapshotCache(Protocol):
    """A single slot holding the last known full employee collection."""

    def read(self) -> EmployeeCollection | None:
        """Return the last written snapshot, or None if empty."""
        ...

    def write(self, collection: EmployeeCollection) -> None:
        """Replace the slot with ``collection``."""
        ...

    def clear(self) -> None:
        """Empty the slot."""
        ...


@runtime_checkable
class RetryPolicy(Protocol):
    """Abstract retry policy for rate-limited upstream calls."""

    max_retries: int

    def is_retryable(self, failure: UpstreamFailure) -> bool:
        """Return whether ``failure`` may be retried at all."""
        ...

    def should_retry(self, failure: UpstreamFailure, attempt: int) -> bool:
        """Return whether retry number ``attempt`` (0-based) should happen."""
        ...

    def compute_backoff(self, attempt: int) -> float:
        """Return the delay before retry number ``attempt`` (0-based)."""
        ...


@runtime_checkable
class EmployeeBackend(Protocol):
    """Abstract upstream employee service client.

    Every method fails only with ``UpstreamFailure``.
    """

    def list_all(self) -> EmployeeCollection:
        """Return the full employee collection."""
        ...

    def find_by_id(self, employee_id: str) -> EmployeeRecord | None:
        """Return one employee, or None when the upstream has no such id."""
        ...

    def create(self, new_employee: NewEmployee) -> EmployeeRecord:
        """Create an employee and return the upstream's record of it."""
        ...

    def delete(self, name: str) -> bool:
        """Delete by name; return the upstream's success flag."""
        ...
