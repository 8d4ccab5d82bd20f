from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Tuple, Union
from uuid import UUID

if TYPE_CHECKING:
    from namemc.server.models import Server


@dataclass(frozen=True)
class Friend:
    uuid: UUID
    name: str = field(compare=False)

    def is_friend_of(self, profile: "Profile") -> bool:
        return profile.get_friend(self.uuid) is not None

    def has_liked_server(self, server: "Server") -> bool:
        return server.is_liked_by(self.uuid)

    def to_dict(self) -> Dict[str, str]:
        return {"uuid": str(self.uuid), "name": self.name}


@dataclass(frozen=True)
class Profile:
    """Friends of a NameMC profile. Two profiles are equal when their UUIDs are."""

    uuid: UUID
    friends: Tuple[Friend, ...] = field(default=(), compare=False)

    @classmethod
    def of(cls, uuid: UUID, friends: Iterable[Friend]) -> "Profile":
        unique: Dict[UUID, Friend] = {}
        for friend in friends:
            unique[friend.uuid] = friend
        return cls(uuid=uuid, friends=tuple(unique.values()))

    def get_friend(
        self, key: Union[UUID, str], *, case_sensitive: bool = False
    ) -> Optional[Friend]:
        """Look a friend up by UUID, or by name when ``key`` is a string."""

        if isinstance(key, UUID):
            return next((friend for friend in self.friends if friend.uuid == key), None)
        if case_sensitive:
            return next((friend for friend in self.friends if friend.name == key), None)
        wanted = key.lower()
        return next(
            (friend for friend in self.friends if friend.name.lower() == wanted), None
        )

    def has_liked_server(self, server: "Server") -> bool:
        return server.is_liked_by(self.uuid)

    def to_dict(self) -> Dict[str, object]:
        return {
            "uuid": str(self.uuid),
            "friends": [friend.to_dict() for friend in self.friends],
        }


__all__ = ["Friend", "Profile"]
