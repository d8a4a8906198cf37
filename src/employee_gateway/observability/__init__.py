"""Observability helpers."""

from .logging import configure_log_level, get_logger

__all__ = ["configure_log_level", "get_logger"]
