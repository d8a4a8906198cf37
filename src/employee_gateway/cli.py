"""CLI for the employee gateway.

Commands:
- serve: Run the HTTP API
- list: List every employee
- search: List employees whose name contains a fragment
- get: Show one employee by id
- highest-salary: Show the highest salary
- top-earners: Show the names of the highest earners
- create: Create an employee
- delete: Delete an employee by id
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from fastapi import FastAPI
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from . import __version__
from .api import create_api
from .application.employees import TOP_EARNERS_COUNT, EmployeeService
from .config import GatewayConfig
from .config_file import load_gateway_config_file
from .domain.employees import EmployeeRecord, NewEmployee
from .exceptions import (
    ConfigFileNotFoundError,
    ConfigFileParseError,
    ConfigFileValidationError,
    UpstreamFailure,
)
from .observability import configure_log_level


class ServerRunner(Protocol):
    """Protocol for serving the HTTP API."""

    def __call__(self, api: FastAPI, *, host: str, port: int, log_level: str) -> None:
        """Serve ``api`` until interrupted."""
        ...


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: GatewayConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    service: EmployeeService
    run_server: ServerRunner


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: GatewayConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(self, *, config: GatewayConfig | None = None) -> CliDependencies:
        """Return dependencies using the configured builder."""
        return self.deps_builder(config=config or self.config)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the employee-gateway entry point.")


class InvalidConfigFileError(typer.BadParameter):
    """Raised when the --config file cannot be loaded."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason, param_hint="--config")


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"employee-gateway {__version__}")
        raise typer.Exit()


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _load_config(
    *, config_path: Path | None, base_url: str | None, log_level: str | None
) -> GatewayConfig:
    config = GatewayConfig.from_env()
    if config_path is not None:
        try:
            file_config = load_gateway_config_file(path=config_path)
        except (
            ConfigFileNotFoundError,
            ConfigFileParseError,
            ConfigFileValidationError,
        ) as exc:
            raise InvalidConfigFileError(str(exc)) from exc
        config = config.with_file_overrides(file_config)
    return config.with_overrides(base_url=base_url, log_level=log_level)


@contextmanager
def _upstream_errors() -> Iterator[None]:
    """Report upstream failures and exit with status 1."""
    try:
        yield
    except UpstreamFailure as failure:
        rprint(f"[red]✗ {failure.kind.value}:[/red] {escape(failure.message)}")
        raise typer.Exit(code=1) from failure


def _print_employees(records: Iterable[EmployeeRecord]) -> None:
    table = Table("id", "name", "salary", "age", "title", "email")
    for record in records:
        table.add_row(
            escape(record.id),
            escape(record.name),
            str(record.salary),
            str(record.age),
            escape(record.title),
            escape(record.email),
        )
    rprint(table)


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Employee gateway: resilient access to the upstream employee service",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to a TOML config file (overrides environment values)",
            ),
        ] = None,
        base_url: Annotated[
            str | None,
            typer.Option("--base-url", help="Base URL of the upstream employee service"),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the installed version and exit",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        config = _load_config(config_path=config_path, base_url=base_url, log_level=log_level)
        try:
            configure_log_level(config.log_level)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def serve(
        ctx: typer.Context,
        host: Annotated[str | None, typer.Option("--host", help="Interface to bind")] = None,
        port: Annotated[int | None, typer.Option("--port", "-p", help="Port to bind")] = None,
    ) -> None:
        """Serve the HTTP API."""
        state = _get_context(ctx)
        config = state.config.with_overrides(host=host, port=port)
        deps = state.build_dependencies(config=config)
        rprint(f"[green]Serving employee gateway on[/green] http://{config.host}:{config.port}")
        deps.run_server(
            create_api(deps.service),
            host=config.host,
            port=config.port,
            log_level=config.log_level,
        )

    @app.command(name="list")
    def list_employees(ctx: typer.Context) -> None:
        """List every employee."""
        deps = _get_context(ctx).build_dependencies()
        with _upstream_errors():
            records = deps.service.get_all()
        _print_employees(records)
        rprint(f"[green]✓ {len(records)} employees[/green]")

    @app.command()
    def search(
        ctx: typer.Context,
        fragment: Annotated[str, typer.Argument(help="Case-insensitive name fragment")],
    ) -> None:
        """List employees whose name contains a fragment."""
        deps = _get_context(ctx).build_dependencies()
        with _upstream_errors():
            records = deps.service.search_by_name(fragment)
        _print_employees(records)
        rprint(f"[green]✓ {len(records)} matching employees[/green]")

    @app.command()
    def get(
        ctx: typer.Context,
        employee_id: Annotated[str, typer.Argument(help="Employee id")],
    ) -> None:
        """Show one employee by id."""
        deps = _get_context(ctx).build_dependencies()
        with _upstream_errors():
            record = deps.service.get_by_id(employee_id)
        _print_employees([record])

    @app.command(name="highest-salary")
    def highest_salary(ctx: typer.Context) -> None:
        """Show the highest salary across all employees."""
        deps = _get_context(ctx).build_dependencies()
        with _upstream_errors():
            salary = deps.service.highest_salary()
        rprint(salary)

    @app.command(name="top-earners")
    def top_earners(
        ctx: typer.Context,
        count: Annotated[
            int,
            typer.Option("--count", "-n", min=0, help="Number of names to show"),
        ] = TOP_EARNERS_COUNT,
    ) -> None:
        """Show the names of the highest earners, best paid first."""
        deps = _get_context(ctx).build_dependencies()
        with _upstream_errors():
            names = deps.service.top_earning_names(count)
        for position, name in enumerate(names, start=1):
            rprint(f"{position}. {escape(name)}")

    @app.command()
    def create(
        ctx: typer.Context,
        name: Annotated[str, typer.Option("--name", help="Employee name")],
        salary: Annotated[int, typer.Option("--salary", min=0, help="Annual salary")],
        age: Annotated[int, typer.Option("--age", min=1, help="Age in years")],
        title: Annotated[str, typer.Option("--title", help="Job title")],
    ) -> None:
        """Create an employee."""
        deps = _get_context(ctx).build_dependencies()
        with _upstream_errors():
            record = deps.service.create(
                NewEmployee(name=name, salary=salary, age=age, title=title)
            )
        rprint(f"[green]✓ Created:[/green] {escape(record.name)} (id={escape(record.id)})")

    @app.command()
    def delete(
        ctx: typer.Context,
        employee_id: Annotated[str, typer.Argument(help="Employee id")],
    ) -> None:
        """Delete an employee by id."""
        deps = _get_context(ctx).build_dependencies()
        with _upstream_errors():
            record = deps.service.delete_by_id(employee_id)
        if record is None:
            rprint(f"[yellow]No employee deleted for id={escape(employee_id)}[/yellow]")
            raise typer.Exit(code=1)
        rprint(f"[green]✓ Deleted:[/green] {escape(record.name)}")

    return app
