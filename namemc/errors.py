"""Exception hierarchy shared by the cache, repositories and HTTP client."""

from __future__ import annotations

from typing import Any, Optional


class NameMCError(Exception):
    """Base class for every error raised by the library."""


class InvalidArgumentError(NameMCError, ValueError):
    """Raised when a key, value, duration or collaborator is missing or invalid."""


class ResponseFormatError(NameMCError, ValueError):
    """Raised when an endpoint answers with an unexpected JSON shape."""


class RemoteFetchError(NameMCError):
    """Wraps the failure of a remote retrieval for ``key``."""

    def __init__(self, key: Any, cause: Optional[BaseException] = None) -> None:
        message = f"Failed to fetch value for key: {key}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)
        self.key = key
        self.cause = cause


__all__ = [
    "InvalidArgumentError",
    "NameMCError",
    "RemoteFetchError",
    "ResponseFormatError",
]
