"""Cache implementations for infrastructure.

Usage example:
    from employee_gateway.infrastructure.cache import EmployeeSnapshotCache

    cache = EmployeeSnapshotCache()
    cache.write(records)
    snapshot = cache.read()
    cache.clear()
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import override

from ..domain.employees import EmployeeCollection, EmployeeRecord
from ..protocols import SnapshotCache


@dataclass
class EmployeeSnapshotCache(SnapshotCache):
    """In-process single-slot cache of the full employee collection.

    Each read, write and clear holds the lock for its own duration only. The
    slot always holds an immutable tuple, so readers never see a partial write.
    """

    _snapshot: EmployeeCollection | None = field(default=None, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @override
    def read(self) -> EmployeeCollection | None:
        with self._lock:
            return self._snapshot

    @override
    def write(self, collection: Iterable[EmployeeRecord]) -> None:
        snapshot = tuple(collection)
        with self._lock:
            self._snapshot = snapshot

    @override
    def clear(self) -> None:
        with self._lock:
            self._snapshot = None
