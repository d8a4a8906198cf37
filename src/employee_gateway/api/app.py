"""FastAPI application factory.

Usage example:
    from employee_gateway.api import create_api
    from employee_gateway.application.employees import EmployeeService

    api = create_api(EmployeeService(backend=client))
"""

from __future__ import annotations

from fastapi import FastAPI

from .. import __version__
from ..application.employees import EmployeeService
from .errors import register_error_handlers
from .routes import router


def create_api(service: EmployeeService) -> FastAPI:
    """Build the API around an already-composed employee service."""
    api = FastAPI(title="Employee Gateway", version=__version__)
    api.state.employee_service = service
    register_error_handlers(api)
    api.include_router(router)
    return api
