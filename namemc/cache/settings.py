from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from namemc.errors import InvalidArgumentError

DEFAULT_TTL = timedelta(minutes=30)


class CacheSettings(BaseModel):
    """Immutable TTL and size bound shared by every entry of a cache manager.

    ``ttl`` accepts a :class:`~datetime.timedelta` or a number of seconds.
    A missing or non-positive ``max_size`` means the cache is unbounded.
    Invalid values raise :class:`InvalidArgumentError`.
    """

    model_config = ConfigDict(frozen=True)

    ttl: timedelta = Field(default=DEFAULT_TTL)
    max_size: Optional[int] = None

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid cache settings: {exc}") from exc

    @field_validator("ttl")
    @classmethod
    def _require_positive_ttl(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("ttl must be positive")
        return value

    @field_validator("max_size", mode="before")
    @classmethod
    def _reject_bool_max_size(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("max_size must be an integer")
        return value

    @field_validator("max_size")
    @classmethod
    def _unbounded_when_not_positive(cls, value: Optional[int]) -> Optional[int]:
        if value is None or value <= 0:
            return None
        return value

    @property
    def ttl_seconds(self) -> float:
        return self.ttl.total_seconds()

    @property
    def is_bounded(self) -> bool:
        return self.max_size is not None


__all__ = ["CacheSettings", "DEFAULT_TTL"]
