"""Domain modules for the gateway."""

from .employees import EmployeeCollection, EmployeeRecord, NewEmployee

__all__ = ["EmployeeCollection", "EmployeeRecord", "NewEmployee"]
