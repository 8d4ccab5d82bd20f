from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from namemc.errors import ResponseFormatError

logger = logging.getLogger("namemc.clients.http")

DEFAULT_BASE_URL = "https://api.namemc.com"
DEFAULT_TIMEOUT_SECONDS = 5.0


class NameMCClient:
    """Blocking JSON client for the NameMC API.

    Requests carry a bounded connect/read timeout. A pre-built
    :class:`httpx.Client` can be injected, in which case the caller keeps
    ownership of it.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                base_url=self._base_url,
                timeout=httpx.Timeout(timeout, connect=timeout, read=timeout),
                headers={"Accept": "application/json"},
            )
        self._client = client

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_json_array(self, path: str) -> List[Any]:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("GET %s", url)
        response = self._client.get(url, headers={"Accept": "application/json"})
        response.raise_for_status()
        try:
            data = response.json()
        except ValueError as exc:
            raise ResponseFormatError(f"Response from {url} is not valid JSON") from exc
        if not isinstance(data, list):
            raise ResponseFormatError(f"Response from {url} is not a JSON array")
        return data

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "NameMCClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT_SECONDS", "NameMCClient"]
