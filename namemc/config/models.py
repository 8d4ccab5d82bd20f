from __future__ import annotations

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from namemc.cache import CacheSettings
from namemc.clients import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS


class HTTPSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0.0)

    @field_validator("base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not isinstance(value, str):
            return value
        return value.strip().rstrip("/") or DEFAULT_BASE_URL


class RepositoryCacheSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    ttl_seconds: float = Field(1800.0, gt=0.0)
    max_size: Optional[int] = None
    single_flight: bool = False

    def to_cache_settings(self) -> CacheSettings:
        return CacheSettings(ttl=timedelta(seconds=self.ttl_seconds), max_size=self.max_size)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    level: str = "INFO"
    log_dir: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        if not isinstance(value, str):
            return value
        return value.strip().upper() or "INFO"


class AppSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    version: int = 1
    http: HTTPSettings = Field(default_factory=lambda: HTTPSettings())
    profiles: RepositoryCacheSettings = Field(
        default_factory=lambda: RepositoryCacheSettings()
    )
    servers: RepositoryCacheSettings = Field(
        default_factory=lambda: RepositoryCacheSettings()
    )
    logging: LoggingSettings = Field(default_factory=lambda: LoggingSettings())


__all__ = [
    "AppSettings",
    "HTTPSettings",
    "LoggingSettings",
    "RepositoryCacheSettings",
]
