"""Thin HTTP clients used by the repositories."""

from .http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, NameMCClient

__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT_SECONDS", "NameMCClient"]
