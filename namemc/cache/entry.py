from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, Generic, TypeVar, Union

from namemc.errors import InvalidArgumentError

V = TypeVar("V")

Clock = Callable[[], float]
TTL = Union[timedelta, float, int]


def ttl_to_seconds(ttl: TTL) -> float:
    """Return ``ttl`` in seconds, rejecting missing or non-positive durations."""

    if ttl is None:
        raise InvalidArgumentError("ttl must not be None")
    if isinstance(ttl, timedelta):
        seconds = ttl.total_seconds()
    elif isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise InvalidArgumentError(f"ttl must be a timedelta or a number of seconds, got {ttl!r}")
    else:
        seconds = float(ttl)
    if seconds <= 0:
        raise InvalidArgumentError("ttl must be positive")
    return seconds


class CacheEntry(Generic[V]):
    """A cached value with an absolute expiration instant.

    The expiry is computed once from ``clock() + ttl`` and never refreshed.
    """

    __slots__ = ("_value", "_expires_at", "_clock")

    def __init__(self, value: V, ttl: TTL, *, clock: Clock = time.monotonic) -> None:
        if value is None:
            raise InvalidArgumentError("value must not be None")
        seconds = ttl_to_seconds(ttl)
        self._value = value
        self._clock = clock
        self._expires_at = clock() + seconds

    @property
    def value(self) -> V:
        return self._value

    @property
    def expires_at(self) -> float:
        return self._expires_at

    def get_value(self) -> V:
        return self._value

    def is_expired(self) -> bool:
        return self._clock() >= self._expires_at

    def remaining(self) -> float:
        return max(0.0, self._expires_at - self._clock())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CacheEntry):
            return NotImplemented
        return self._expires_at == other._expires_at and self._value == other._value

    def __repr__(self) -> str:
        return f"CacheEntry(value={self._value!r}, expires_at={self._expires_at!r})"


__all__ = ["CacheEntry", "Clock", "TTL", "ttl_to_seconds"]
