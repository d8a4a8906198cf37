"""Upstream IO: HTTP transport and payload validation."""
