"""Concrete infrastructure implementations and shared helpers."""

from .cache import EmployeeSnapshotCache
from .io.http import ResilientEmployeeClient, build_employee_client, classify_status
from .resilience import RetryPolicy, retry_call

__all__ = [
    "EmployeeSnapshotCache",
    "ResilientEmployeeClient",
    "RetryPolicy",
    "build_employee_client",
    "classify_status",
    "retry_call",
]
