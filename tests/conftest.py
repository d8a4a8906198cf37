"""Pytest fixtures shared across the suite.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import logging
import socket
from collections.abc import Iterator

import pytest

from employee_gateway.observability import configure_log_level
from tests.fakes import FakeEmployeeUpstream, employee_payload

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================

_original_socket_connect = socket.socket.connect


def _blocked_socket_connect(self, *args, **kwargs):
    """Raise an error if any test tries to make a real network connection."""
    raise RuntimeError(
        "Tests must not make network connections! "
        "Use FakeEmployeeUpstream or FakeEmployeeBackend instead. "
        f"Attempted connection to: {args}"
    )


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch):
    """Block all network access in tests.

    This fixture runs automatically for all tests and prevents any real
    network connections. Tests that need the upstream should use
    FakeEmployeeUpstream, which answers in memory.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)
    yield


@pytest.fixture(autouse=True)
def reset_log_level() -> Iterator[None]:
    """Restore the default gateway log level after each test."""
    yield
    configure_log_level(logging.INFO)


@pytest.fixture
def upstream() -> FakeEmployeeUpstream:
    """Provide a fake upstream holding three employees."""
    return FakeEmployeeUpstream(
        employees=[
            employee_payload("e-1", "Ada Lovelace", salary=185_000, age=36, title="Engineer"),
            employee_payload("e-2", "Grace Hopper", salary=210_000, age=45, title="Admiral"),
            employee_payload("e-3", "Alan Turing", salary=150_000, age=41, title="Researcher"),
        ]
    )
