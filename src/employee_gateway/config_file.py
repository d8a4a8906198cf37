"""Typed parsing and validation for gateway config files.

Usage example:
    from pathlib import Path

    from employee_gateway.config import GatewayConfig
    from employee_gateway.config_file import load_gateway_config_file

    config = GatewayConfig.from_env().with_file_overrides(
        load_gateway_config_file(path=Path("config/gateway.toml"))
    )

Example file:
    schema_version = 1

    [gateway]
    base_url = "http://localhost:8112/api/v1/employee"
    max_retries = 5
    retry_backoff_seconds = 1.0
    max_backoff_seconds = 30.0
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError

_SCHEMA_VERSION = 1
_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclass(frozen=True)
class GatewayConfigFile:
    """Validated gateway config values loaded from a TOML file."""

    base_url: str | None = None
    max_retries: int | None = None
    retry_backoff_seconds: float | None = None
    max_backoff_seconds: float | None = None
    backoff_jitter_seconds: float | None = None
    timeout_seconds: float | None = None
    host: str | None = None
    port: int | None = None
    log_level: str | None = None


class _GatewaySectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str | None = None
    max_retries: int | None = None
    retry_backoff_seconds: float | None = None
    max_backoff_seconds: float | None = None
    backoff_jitter_seconds: float | None = None
    timeout_seconds: float | None = None
    host: str | None = None
    port: int | None = None
    log_level: str | None = None

    @field_validator("base_url", "host")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("max_retries")
    @classmethod
    def _validate_non_negative_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 0:
            raise ValueError
        return value

    @field_validator(
        "retry_backoff_seconds",
        "max_backoff_seconds",
        "backoff_jitter_seconds",
        "timeout_seconds",
    )
    @classmethod
    def _validate_non_negative_seconds(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value < 0.0:
            raise ValueError
        return value

    @field_validator("port")
    @classmethod
    def _validate_port(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if not 1 <= value <= 65535:
            raise ValueError
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError
        return level


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    gateway: _GatewaySectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def load_gateway_config_file(*, path: Path) -> GatewayConfigFile:
    """Load and validate a gateway TOML config file.

    Raises:
        ConfigFileNotFoundError: If ``path`` does not exist.
        ConfigFileParseError: If the file is not valid TOML.
        ConfigFileValidationError: If the TOML does not match the schema.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(str(path))
    try:
        payload = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path)) from exc
    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
        raise ConfigFileValidationError(str(path), ", ".join(fields)) from exc

    section = model.gateway
    return GatewayConfigFile(
        base_url=section.base_url,
        max_retries=section.max_retries,
        retry_backoff_seconds=section.retry_backoff_seconds,
        max_backoff_seconds=section.max_backoff_seconds,
        backoff_jitter_seconds=section.backoff_jitter_seconds,
        timeout_seconds=section.timeout_seconds,
        host=section.host,
        port=section.port,
        log_level=section.log_level,
    )
