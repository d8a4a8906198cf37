"""Centralised, injectable configuration for the employee gateway."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import GatewayConfigFile

DEFAULT_BASE_URL = "http://localhost:8112/api/v1/employee"


class NonNegativeIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a non-negative integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a non-negative integer.")


class NonNegativeNumberEnvVarError(ValueError):
    """Raised when an environment variable must be a non-negative number."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a non-negative number.")


class PortEnvVarError(ValueError):
    """Raised when an environment variable must be a TCP port."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a port number between 1 and 65535.")


@dataclass(frozen=True)
class GatewayConfig:
    """Immutable configuration for the gateway.

    Load from environment with `GatewayConfig.from_env()` or construct directly for testing.
    """

    # Upstream employee service
    base_url: str = DEFAULT_BASE_URL
    max_retries: int = 5
    retry_backoff_seconds: float = 1.0
    max_backoff_seconds: float = 30.0
    backoff_jitter_seconds: float = 0.0
    timeout_seconds: float = 10.0

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8111

    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            GatewayConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            base_url=os.getenv("EMPLOYEE_API_BASE_URL", "").strip() or DEFAULT_BASE_URL,
            max_retries=_parse_non_negative_int(
                os.getenv("EMPLOYEE_API_MAX_RETRIES", "5"), env_name="EMPLOYEE_API_MAX_RETRIES"
            ),
            retry_backoff_seconds=_parse_non_negative_float(
                os.getenv("EMPLOYEE_API_RETRY_BACKOFF_SECONDS", "1.0"),
                env_name="EMPLOYEE_API_RETRY_BACKOFF_SECONDS",
            ),
            max_backoff_seconds=_parse_non_negative_float(
                os.getenv("EMPLOYEE_API_MAX_BACKOFF_SECONDS", "30"),
                env_name="EMPLOYEE_API_MAX_BACKOFF_SECONDS",
            ),
            backoff_jitter_seconds=_parse_non_negative_float(
                os.getenv("EMPLOYEE_API_BACKOFF_JITTER_SECONDS", "0"),
                env_name="EMPLOYEE_API_BACKOFF_JITTER_SECONDS",
            ),
            timeout_seconds=_parse_non_negative_float(
                os.getenv("EMPLOYEE_API_TIMEOUT_SECONDS", "10"),
                env_name="EMPLOYEE_API_TIMEOUT_SECONDS",
            ),
            host=os.getenv("GATEWAY_HOST", "").strip() or "127.0.0.1",
            port=_parse_port(os.getenv("GATEWAY_PORT", "8111"), env_name="GATEWAY_PORT"),
            log_level=os.getenv("LOG_LEVEL", "").strip().upper() or "INFO",
        )

    def with_overrides(
        self,
        *,
        base_url: str | None = None,
        host: str | None = None,
        port: int | None = None,
        log_level: str | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            base_url=self.base_url if base_url is None else base_url.strip(),
            host=self.host if host is None else host,
            port=self.port if port is None else port,
            log_level=self.log_level if log_level is None else log_level.upper(),
        )

    def with_file_overrides(self, file_config: GatewayConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            base_url=self.base_url if file_config.base_url is None else file_config.base_url,
            max_retries=self.max_retries
            if file_config.max_retries is None
            else file_config.max_retries,
            retry_backoff_seconds=self.retry_backoff_seconds
            if file_config.retry_backoff_seconds is None
            else file_config.retry_backoff_seconds,
            max_backoff_seconds=self.max_backoff_seconds
            if file_config.max_backoff_seconds is None
            else file_config.max_backoff_seconds,
            backoff_jitter_seconds=self.backoff_jitter_seconds
            if file_config.backoff_jitter_seconds is None
            else file_config.backoff_jitter_seconds,
            timeout_seconds=self.timeout_seconds
            if file_config.timeout_seconds is None
            else file_config.timeout_seconds,
            host=self.host if file_config.host is None else file_config.host,
            port=self.port if file_config.port is None else file_config.port,
            log_level=self.log_level if file_config.log_level is None else file_config.log_level,
        )


def _parse_non_negative_int(value: str, *, env_name: str) -> int:
    """Parse a non-negative integer from an environment variable."""
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise NonNegativeIntegerEnvVarError(env_name) from exc
    if parsed < 0:
        raise NonNegativeIntegerEnvVarError(env_name)
    return parsed


def _parse_non_negative_float(value: str, *, env_name: str) -> float:
    """Parse a non-negative number from an environment variable."""
    try:
        parsed = float(value.strip())
    except ValueError as exc:
        raise NonNegativeNumberEnvVarError(env_name) from exc
    if parsed < 0:
        raise NonNegativeNumberEnvVarError(env_name)
    return parsed


def _parse_port(value: str, *, env_name: str) -> int:
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise PortEnvVarError(env_name) from exc
    if not 1 <= parsed <= 65535:
        raise PortEnvVarError(env_name)
    return parsed
