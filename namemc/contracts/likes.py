from __future__ import annotations

from uuid import UUID

from pydantic import TypeAdapter

_LIKE_ADAPTER: TypeAdapter[UUID] = TypeAdapter(UUID)


def parse_like(value: str) -> UUID:
    """Validate one item of ``/server/{address}/likes`` (a UUID string)."""

    return _LIKE_ADAPTER.validate_python(value)


__all__ = ["parse_like"]
