from __future__ import annotations

from typing import Optional

from namemc.clients import NameMCClient
from namemc.config import AppSettings
from namemc.profile import ProfileRepository
from namemc.server import ServerRepository


class NameMC:
    """Entry point bundling one profile repository and one server repository.

    Repositories not supplied by the caller are created with default cache
    settings and share a single :class:`NameMCClient`, which :meth:`close`
    releases.
    """

    def __init__(
        self,
        profile_repository: Optional[ProfileRepository] = None,
        server_repository: Optional[ServerRepository] = None,
        *,
        client: Optional[NameMCClient] = None,
    ) -> None:
        self._owned_client: Optional[NameMCClient] = None
        if profile_repository is None or server_repository is None:
            if client is None:
                client = NameMCClient()
                self._owned_client = client
        if profile_repository is None:
            profile_repository = ProfileRepository(client)
        if server_repository is None:
            server_repository = ServerRepository(client)
        self._profile_repository = profile_repository
        self._server_repository = server_repository

    @classmethod
    def from_settings(
        cls, settings: AppSettings, *, client: Optional[NameMCClient] = None
    ) -> "NameMC":
        owned = client is None
        if client is None:
            client = NameMCClient(
                settings.http.base_url, timeout=settings.http.timeout_seconds
            )
        profiles = ProfileRepository(
            client,
            settings=settings.profiles.to_cache_settings(),
            single_flight=settings.profiles.single_flight,
        )
        servers = ServerRepository(
            client,
            settings=settings.servers.to_cache_settings(),
            single_flight=settings.servers.single_flight,
        )
        instance = cls(profiles, servers)
        if owned:
            instance._owned_client = client
        return instance

    @property
    def profile_repository(self) -> ProfileRepository:
        return self._profile_repository

    @property
    def server_repository(self) -> ServerRepository:
        return self._server_repository

    def close(self) -> None:
        if self._owned_client is not None:
            self._owned_client.close()
            self._owned_client = None

    def __enter__(self) -> "NameMC":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["NameMC"]
