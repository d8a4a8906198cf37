"""Composition root for wiring the gateway's dependencies."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from .api import create_api
from .application.employees import EmployeeService
from .cli import CliDependencies, create_app
from .config import GatewayConfig
from .infrastructure import build_employee_client


def build_employee_service(config: GatewayConfig) -> EmployeeService:
    """Build the facade over a resilient client configured from ``config``."""
    client = build_employee_client(
        base_url=config.base_url,
        max_retries=config.max_retries,
        retry_backoff_seconds=config.retry_backoff_seconds,
        max_backoff_seconds=config.max_backoff_seconds,
        jitter_seconds=config.backoff_jitter_seconds,
        timeout_seconds=config.timeout_seconds,
    )
    return EmployeeService(backend=client)


def build_api(config: GatewayConfig) -> FastAPI:
    return create_api(build_employee_service(config))


def run_server(api: FastAPI, *, host: str, port: int, log_level: str) -> None:
    uvicorn.run(api, host=host, port=port, log_level=log_level.lower())


def build_cli_dependencies(*, config: GatewayConfig) -> CliDependencies:
    """Build concrete dependencies for CLI commands."""
    return CliDependencies(service=build_employee_service(config), run_server=run_server)


app = create_app(build_cli_dependencies)
