"""Tests for config-file schema parsing and fail-fast validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from employee_gateway.config_file import GatewayConfigFile, load_gateway_config_file
from employee_gateway.exceptions import (
    ConfigFileNotFoundError,
    ConfigFileParseError,
    ConfigFileValidationError,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "gateway.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_gateway_config_file_parses_valid_toml(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
schema_version = 1

[gateway]
base_url = " http://upstream.test/api/v1/employee "
max_retries = 4
retry_backoff_seconds = 0.5
max_backoff_seconds = 10
backoff_jitter_seconds = 0.2
timeout_seconds = 7.5
host = "0.0.0.0"
port = 8080
log_level = "debug"
""".strip(),
    )

    loaded = load_gateway_config_file(path=path)

    assert loaded == GatewayConfigFile(
        base_url="http://upstream.test/api/v1/employee",
        max_retries=4,
        retry_backoff_seconds=0.5,
        max_backoff_seconds=10.0,
        backoff_jitter_seconds=0.2,
        timeout_seconds=7.5,
        host="0.0.0.0",
        port=8080,
        log_level="DEBUG",
    )


def test_empty_gateway_section_leaves_every_value_unset(tmp_path: Path) -> None:
    path = _write(tmp_path, "schema_version = 1\n\n[gateway]\n")

    assert load_gateway_config_file(path=path) == GatewayConfigFile()


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(ConfigFileNotFoundError):
        load_gateway_config_file(path=tmp_path / "absent.toml")


def test_invalid_toml_raises_parse_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "schema_version = \n[gateway")

    with pytest.raises(ConfigFileParseError):
        load_gateway_config_file(path=path)


@pytest.mark.parametrize(
    ("content", "field"),
    [
        ("schema_version = 2\n[gateway]\n", "schema_version"),
        ("[gateway]\n", "schema_version"),
        ("schema_version = 1\n", "gateway"),
        ("schema_version = 1\n[gateway]\nretries = 3\n", "gateway.retries"),
        ("schema_version = 1\n[gateway]\nmax_retries = -1\n", "gateway.max_retries"),
        ("schema_version = 1\n[gateway]\ntimeout_seconds = -2.0\n", "gateway.timeout_seconds"),
        ("schema_version = 1\n[gateway]\nport = 0\n", "gateway.port"),
        ("schema_version = 1\n[gateway]\nbase_url = \"  \"\n", "gateway.base_url"),
        ("schema_version = 1\n[gateway]\nlog_level = \"LOUD\"\n", "gateway.log_level"),
    ],
)
def test_schema_violations_raise_validation_error(
    tmp_path: Path, content: str, field: str
) -> None:
    path = _write(tmp_path, content)

    with pytest.raises(ConfigFileValidationError, match=field):
        load_gateway_config_file(path=path)
