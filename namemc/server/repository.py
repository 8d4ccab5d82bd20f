from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import List, Optional
from urllib.parse import quote
from uuid import UUID

from namemc.cache import CacheManager, CacheSettings
from namemc.clients import NameMCClient
from namemc.contracts import parse_like
from namemc.errors import InvalidArgumentError
from namemc.repository import BaseRepository

from .models import Server

logger = logging.getLogger("namemc.server")

LIKES_PATH = "/server/{address}/likes"


class ServerRepository(BaseRepository[str, Server]):
    """Caches who liked a server, keyed by its lowercased address."""

    def __init__(
        self,
        client: Optional[NameMCClient] = None,
        cache: Optional[CacheManager[str, Server]] = None,
        *,
        settings: Optional[CacheSettings] = None,
        executor: Optional[Executor] = None,
        single_flight: bool = False,
    ) -> None:
        super().__init__(
            cache, settings=settings, executor=executor, single_flight=single_flight
        )
        self._client = client if client is not None else NameMCClient()

    @property
    def client(self) -> NameMCClient:
        return self._client

    def normalize_key(self, key: str) -> str:
        if not isinstance(key, str):
            raise InvalidArgumentError(f"Server address must be a string, got {key!r}")
        normalized = key.strip().lower()
        if not normalized:
            raise InvalidArgumentError("Server address must not be blank")
        return normalized

    def retrieve(self, key: str) -> Server:
        items = self._client.get_json_array(LIKES_PATH.format(address=quote(key, safe="")))
        likes: List[UUID] = []
        for item in items:
            if not isinstance(item, str):
                continue
            likes.append(parse_like(item))
        logger.debug("Retrieved %d likes for %s", len(likes), key)
        return Server.of(key, likes)


__all__ = ["LIKES_PATH", "ServerRepository"]
