"""Exports for test fakes."""

from .backend import FakeEmployeeBackend
from .cache import RecordingSnapshotCache
from .upstream import BASE_URL, FakeEmployeeUpstream, ScriptedReply, employee_payload, record

__all__ = [
    "BASE_URL",
    "FakeEmployeeBackend",
    "FakeEmployeeUpstream",
    "RecordingSnapshotCache",
    "ScriptedReply",
    "employee_payload",
    "record",
]
