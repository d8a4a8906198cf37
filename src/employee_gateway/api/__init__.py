"""HTTP API exposing the employee facade."""

from .app import create_api

__all__ = ["create_api"]
