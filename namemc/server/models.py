from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable
from uuid import UUID


@dataclass(frozen=True)
class Server:
    """Profiles that liked a server. Two servers are equal when their addresses are."""

    address: str
    likes: FrozenSet[UUID] = field(default=frozenset(), compare=False)

    @classmethod
    def of(cls, address: str, likes: Iterable[UUID]) -> "Server":
        return cls(address=address, likes=frozenset(likes))

    def is_liked_by(self, uuid: UUID) -> bool:
        return uuid in self.likes

    def to_dict(self) -> Dict[str, object]:
        return {
            "address": self.address,
            "likes": sorted(str(uuid) for uuid in self.likes),
        }


__all__ = ["Server"]
