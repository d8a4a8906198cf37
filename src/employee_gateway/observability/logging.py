"""Shared logging utilities for consistent gateway observability.

Usage example:
    from employee_gateway.observability.logging import get_logger

    logger = get_logger("employee_gateway.infrastructure.http")
    logger.info("Updated employee cache with %s employees.", count)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_NAMESPACE = "employee_gateway"

_level = logging.INFO


def get_logger(name: str) -> logging.Logger:
    """Return a standard logger configured for UTC timestamps.

    Args:
        name: Logger name (use a stable module-qualified name).

    Returns:
        A logger with a single stream handler and a consistent UTC format.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_level)
        logger.propagate = False
    return logger


def configure_log_level(level: str | int) -> None:
    """Apply a log level to every gateway logger, including ones created later.

    Args:
        level: A level name such as ``"DEBUG"`` or a numeric logging level.
    """
    global _level
    resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(resolved, int):
        raise UnknownLogLevelError(str(level))
    _level = resolved
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if isinstance(logger, logging.Logger) and (
            name == _NAMESPACE or name.startswith(f"{_NAMESPACE}.")
        ):
            logger.setLevel(resolved)


class UnknownLogLevelError(ValueError):
    """Raised when a configured log level name is not recognised."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Unknown log level: {level}")
