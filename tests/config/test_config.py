"""Tests for GatewayConfig behaviour."""

from __future__ import annotations

import pytest

import employee_gateway.config as config_module
from employee_gateway.config import (
    DEFAULT_BASE_URL,
    GatewayConfig,
    NonNegativeIntegerEnvVarError,
    NonNegativeNumberEnvVarError,
    PortEnvVarError,
)


def _use_env(monkeypatch: pytest.MonkeyPatch, env: dict[str, str]) -> None:
    def fake_getenv(key: str, default: str = "") -> str:
        return env.get(key, default)

    def fake_load_dotenv(dotenv_path: str | None = None) -> bool:
        _ = dotenv_path
        return True

    monkeypatch.setattr(config_module.os, "getenv", fake_getenv)
    monkeypatch.setattr(config_module, "load_dotenv", fake_load_dotenv)


def test_defaults() -> None:
    config = GatewayConfig()

    assert config.base_url == DEFAULT_BASE_URL
    assert config.max_retries == 5
    assert config.retry_backoff_seconds == 1.0
    assert config.max_backoff_seconds == 30.0
    assert config.backoff_jitter_seconds == 0.0
    assert config.timeout_seconds == 10.0
    assert config.host == "127.0.0.1"
    assert config.port == 8111
    assert config.log_level == "INFO"


def test_from_env_without_variables_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_env(monkeypatch, {})

    assert GatewayConfig.from_env() == GatewayConfig()


def test_from_env_reads_every_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_env(
        monkeypatch,
        {
            "EMPLOYEE_API_BASE_URL": " http://upstream.test/api/v1/employee ",
            "EMPLOYEE_API_MAX_RETRIES": "3",
            "EMPLOYEE_API_RETRY_BACKOFF_SECONDS": "0.25",
            "EMPLOYEE_API_MAX_BACKOFF_SECONDS": "8",
            "EMPLOYEE_API_BACKOFF_JITTER_SECONDS": "0.1",
            "EMPLOYEE_API_TIMEOUT_SECONDS": "4.5",
            "GATEWAY_HOST": "0.0.0.0",
            "GATEWAY_PORT": "9000",
            "LOG_LEVEL": "debug",
        },
    )

    config = GatewayConfig.from_env()

    assert config.base_url == "http://upstream.test/api/v1/employee"
    assert config.max_retries == 3
    assert config.retry_backoff_seconds == 0.25
    assert config.max_backoff_seconds == 8.0
    assert config.backoff_jitter_seconds == 0.1
    assert config.timeout_seconds == 4.5
    assert config.host == "0.0.0.0"
    assert config.port == 9000
    assert config.log_level == "DEBUG"


def test_from_env_allows_zero_retries(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_env(monkeypatch, {"EMPLOYEE_API_MAX_RETRIES": "0"})

    assert GatewayConfig.from_env().max_retries == 0


@pytest.mark.parametrize("value", ["-1", "many", "1.5"])
def test_from_env_rejects_invalid_max_retries(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    _use_env(monkeypatch, {"EMPLOYEE_API_MAX_RETRIES": value})

    with pytest.raises(NonNegativeIntegerEnvVarError):
        GatewayConfig.from_env()


@pytest.mark.parametrize(
    "name",
    [
        "EMPLOYEE_API_RETRY_BACKOFF_SECONDS",
        "EMPLOYEE_API_MAX_BACKOFF_SECONDS",
        "EMPLOYEE_API_BACKOFF_JITTER_SECONDS",
        "EMPLOYEE_API_TIMEOUT_SECONDS",
    ],
)
def test_from_env_rejects_negative_seconds(monkeypatch: pytest.MonkeyPatch, name: str) -> None:
    _use_env(monkeypatch, {name: "-0.5"})

    with pytest.raises(NonNegativeNumberEnvVarError, match=name):
        GatewayConfig.from_env()


@pytest.mark.parametrize("value", ["0", "70000", "http"])
def test_from_env_rejects_invalid_port(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    _use_env(monkeypatch, {"GATEWAY_PORT": value})

    with pytest.raises(PortEnvVarError):
        GatewayConfig.from_env()


def test_with_overrides_preserves_other_fields() -> None:
    base = GatewayConfig(max_retries=2, timeout_seconds=3.0)

    updated = base.with_overrides(base_url=" http://cli.test ", port=9999, log_level="warning")

    assert updated.base_url == "http://cli.test"
    assert updated.port == 9999
    assert updated.log_level == "WARNING"
    assert updated.host == base.host
    assert updated.max_retries == 2
    assert updated.timeout_seconds == 3.0


def test_with_overrides_without_values_is_identity() -> None:
    base = GatewayConfig(base_url="http://env.test")

    assert base.with_overrides() == base
