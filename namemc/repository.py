"""Generic cache-or-populate repository shared by the profile and server APIs."""

from __future__ import annotations

import asyncio
import logging
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future
from typing import Dict, Generic, Hashable, Optional, TypeVar

from namemc.cache import CacheManager, CacheSettings
from namemc.errors import InvalidArgumentError, RemoteFetchError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger("namemc.repository")


class BaseRepository(ABC, Generic[K, V]):
    """Serves values from a :class:`CacheManager`, retrieving them remotely on a miss.

    Subclasses implement :meth:`retrieve` and, where keys need it,
    :meth:`normalize_key`. Every public operation normalizes its key first so
    logically equal keys share one cache entry.

    ``executor`` is used by :meth:`fetch_async`; when omitted the running
    event loop's default executor is used. With ``single_flight`` enabled,
    concurrent misses on the same key share a single :meth:`retrieve` call.
    """

    def __init__(
        self,
        cache: Optional[CacheManager[K, V]] = None,
        *,
        settings: Optional[CacheSettings] = None,
        executor: Optional[Executor] = None,
        single_flight: bool = False,
    ) -> None:
        if cache is not None and settings is not None:
            raise InvalidArgumentError("pass either a cache manager or cache settings, not both")
        if cache is None:
            cache = CacheManager(settings if settings is not None else CacheSettings())
        self._cache = cache
        self._executor = executor
        self._single_flight = single_flight
        self._inflight: Dict[K, "Future[V]"] = {}
        self._inflight_lock = threading.Lock()

    @property
    def cache_manager(self) -> CacheManager[K, V]:
        return self._cache

    def get_cache_manager(self) -> CacheManager[K, V]:
        return self._cache

    @property
    def single_flight(self) -> bool:
        return self._single_flight

    def normalize_key(self, key: K) -> K:
        if key is None:
            raise InvalidArgumentError("key must not be None")
        return key

    @abstractmethod
    def retrieve(self, key: K) -> V:
        """Load a fresh value for an already normalized ``key`` from the remote source."""

    def fetch(self, key: K) -> V:
        normalized = self.normalize_key(key)
        cached = self._cache.get(normalized)
        if cached is not None:
            return cached
        logger.debug("Cache miss for %r", normalized)
        if self._single_flight:
            return self._load_shared(normalized)
        return self._load(normalized)

    def refresh(self, key: K) -> V:
        """Retrieve ``key`` remotely regardless of the cache, then store the result."""

        return self._load(self.normalize_key(key))

    async def fetch_async(self, key: K) -> V:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.fetch, key)

    def get(self, key: K) -> Optional[V]:
        return self._cache.get(self.normalize_key(key))

    def put(self, key: K, value: V) -> None:
        self._cache.put(self.normalize_key(key), value)

    def remove_key(self, key: K) -> None:
        self._cache.remove(self.normalize_key(key))

    def clear_all(self) -> None:
        self._cache.clear()

    def _load(self, key: K) -> V:
        try:
            value = self.retrieve(key)
        except (InvalidArgumentError, RemoteFetchError):
            raise
        except Exception as exc:
            logger.warning("Failed to retrieve %r: %s", key, exc)
            raise RemoteFetchError(key, exc) from exc
        if value is None:
            logger.warning("Retrieval for %r returned no value", key)
            raise RemoteFetchError(key)
        self._cache.put(key, value)
        return value

    def _load_shared(self, key: K) -> V:
        with self._inflight_lock:
            pending = self._inflight.get(key)
            if pending is None:
                pending = Future()
                self._inflight[key] = pending
                owner = True
            else:
                owner = False
        if not owner:
            return pending.result()
        try:
            cached = self._cache.get(key)
            value = cached if cached is not None else self._load(key)
        except BaseException as exc:
            pending.set_exception(exc)
            raise
        else:
            pending.set_result(value)
            return value
        finally:
            with self._inflight_lock:
                self._inflight.pop(key, None)


__all__ = ["BaseRepository"]
