from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import List, Optional, Union
from uuid import UUID

from namemc.cache import CacheManager, CacheSettings
from namemc.clients import NameMCClient
from namemc.contracts import FriendPayload
from namemc.errors import InvalidArgumentError
from namemc.repository import BaseRepository

from .models import Friend, Profile

logger = logging.getLogger("namemc.profile")

FRIENDS_PATH = "/profile/{uuid}/friends"


class ProfileRepository(BaseRepository[UUID, Profile]):
    """Caches the friend lists of NameMC profiles, keyed by profile UUID."""

    def __init__(
        self,
        client: Optional[NameMCClient] = None,
        cache: Optional[CacheManager[UUID, Profile]] = None,
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

    def normalize_key(self, key: Union[UUID, str]) -> UUID:
        if isinstance(key, UUID):
            return key
        if isinstance(key, str):
            try:
                return UUID(key.strip())
            except ValueError as exc:
                raise InvalidArgumentError(f"Invalid profile UUID: {key!r}") from exc
        raise InvalidArgumentError(f"Profile key must be a UUID, got {key!r}")

    def retrieve(self, key: UUID) -> Profile:
        items = self._client.get_json_array(FRIENDS_PATH.format(uuid=key))
        friends: List[Friend] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            payload = FriendPayload.model_validate(item)
            friends.append(Friend(uuid=payload.uuid, name=payload.name))
        logger.debug("Retrieved %d friends for %s", len(friends), key)
        return Profile.of(key, friends)


__all__ = ["FRIENDS_PATH", "ProfileRepository"]
