"""Cache fakes for tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import override

from employee_gateway.domain.employees import EmployeeCollection
from employee_gateway.protocols import SnapshotCache


def _empty_events() -> list[str]:
    return []


@dataclass
class RecordingSnapshotCache(SnapshotCache):
    """Single-slot cache that records every operation, in order."""

    snapshot: EmployeeCollection | None = None
    events: list[str] = field(default_factory=_empty_events)

    @override
    def read(self) -> EmployeeCollection | None:
        self.events.append("read")
        return self.snapshot

    @override
    def write(self, collection: EmployeeCollection) -> None:
        self.events.append("write")
        self.snapshot = tuple(collection)

    @override
    def clear(self) -> None:
        self.events.append("clear")
        self.snapshot = None
