from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from types import MappingProxyType
from typing import Generic, Hashable, Mapping, Optional, TypeVar

from namemc.errors import InvalidArgumentError

from .entry import CacheEntry, Clock
from .settings import CacheSettings


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger("namemc.cache")


class CacheManager(Generic[K, V]):
    """Thread-safe in-memory cache with TTL and optional LRU bound.

    Expired entries are only detected lazily on :meth:`get` or eagerly via
    :meth:`cleanup`; there is no background sweeper.
    """

    def __init__(self, settings: CacheSettings, *, clock: Clock = time.monotonic) -> None:
        if settings is None:
            raise InvalidArgumentError("settings must not be None")
        self._settings = settings
        self._clock = clock
        self._store: "OrderedDict[K, CacheEntry[V]]" = OrderedDict()
        self._lock = threading.RLock()

    @property
    def settings(self) -> CacheSettings:
        return self._settings

    def get_cache_settings(self) -> CacheSettings:
        return self._settings

    def get_cache(self) -> Mapping[K, CacheEntry[V]]:
        """Return a read-only snapshot of the current key to entry state."""

        with self._lock:
            return MappingProxyType(dict(self._store))

    def get(self, key: K) -> Optional[V]:
        _require_key(key)
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if entry.is_expired():
                self._store.pop(key, None)
                return None
            if self._settings.is_bounded:
                self._store.move_to_end(key, last=True)
            return entry.value

    def put(self, key: K, value: V) -> None:
        _require_key(key)
        if value is None:
            raise InvalidArgumentError("value must not be None")
        entry = CacheEntry(value, self._settings.ttl, clock=self._clock)
        with self._lock:
            self._store[key] = entry
            self._store.move_to_end(key, last=True)
            max_size = self._settings.max_size
            if max_size is None:
                return
            while len(self._store) > max_size:
                evicted, _ = self._store.popitem(last=False)
                logger.debug("Evicted least recently used key %r", evicted)

    def remove(self, key: K) -> None:
        _require_key(key)
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def cleanup(self) -> int:
        """Drop every expired entry and return how many were removed."""

        with self._lock:
            expired = [key for key, entry in self._store.items() if entry.is_expired()]
            for key in expired:
                del self._store[key]
        if expired:
            logger.debug("Removed %d expired cache entries", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            entry = self._store.get(key)  # type: ignore[call-overload]
            return entry is not None and not entry.is_expired()


def _require_key(key: object) -> None:
    if key is None:
        raise InvalidArgumentError("key must not be None")


__all__ = ["CacheManager"]
