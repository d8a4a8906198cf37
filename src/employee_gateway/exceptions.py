"""Custom exceptions for the employee gateway.

Upstream failures form a closed taxonomy: one exception type whose ``kind`` is
one of four ``UpstreamFailureKind`` members. Callers switch on the kind rather
than on exception subclasses.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self, assert_never


class EmployeeGatewayError(Exception):
    """Base exception for all gateway errors."""

    pass


class UpstreamFailureKind(StrEnum):
    """Outcome classes for a failed upstream call."""

    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    UNEXPECTED = "unexpected"

    @property
    def http_status(self) -> int:
        """HTTP status code a caller-facing boundary should answer with."""
        match self:
            case UpstreamFailureKind.RATE_LIMITED:
                return 429
            case UpstreamFailureKind.MALFORMED:
                return 400
            case UpstreamFailureKind.NOT_FOUND:
                return 404
            case UpstreamFailureKind.UNEXPECTED:
                return 500
            case _:
                assert_never(self)


class UpstreamFailure(EmployeeGatewayError):
    """Raised when the upstream employee service call fails.

    Attributes:
        kind: Which of the four failure classes this is.
        message: Human-readable description.
        cause: The original transport/protocol error, when there is one.
    """

    def __init__(
        self,
        kind: UpstreamFailureKind,
        message: str,
        *,
        cause: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __repr__(self) -> str:
        return f"UpstreamFailure(kind={self.kind.value!r}, message={self.message!r})"

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    @classmethod
    def rate_limited(cls, message: str, *, cause: BaseException | None = None) -> Self:
        return cls(UpstreamFailureKind.RATE_LIMITED, message, cause=cause)

    @classmethod
    def not_found(cls, message: str, *, cause: BaseException | None = None) -> Self:
        return cls(UpstreamFailureKind.NOT_FOUND, message, cause=cause)

    @classmethod
    def malformed(cls, message: str, *, cause: BaseException | None = None) -> Self:
        return cls(UpstreamFailureKind.MALFORMED, message, cause=cause)

    @classmethod
    def unexpected(cls, message: str, *, cause: BaseException | None = None) -> Self:
        return cls(UpstreamFailureKind.UNEXPECTED, message, cause=cause)

    @classmethod
    def retries_exhausted(cls, last: UpstreamFailure, retries: int) -> Self:
        """Re-classify the last failure of an exhausted retry loop as rate limiting."""
        return cls(
            UpstreamFailureKind.RATE_LIMITED,
            f"Retries exhausted on rate-limited employee service after {retries} retries.",
            cause=last.cause or last,
        )


class ConfigFileNotFoundError(EmployeeGatewayError):
    """Raised when a requested config file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(EmployeeGatewayError):
    """Raised when a config file is not valid TOML."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file is not valid TOML: {path}")


class ConfigFileValidationError(EmployeeGatewayError):
    """Raised when a config file does not match the supported schema."""

    def __init__(self, path: str, details: str) -> None:
        super().__init__(f"Config file {path} is invalid: {details}")
