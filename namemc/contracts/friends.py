from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FriendPayload(BaseModel):
    """One item of ``/profile/{uuid}/friends``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    uuid: UUID = Field(..., description="Unique id of the befriended profile.")
    name: str = Field(..., description="Last known name of the befriended profile.")


__all__ = ["FriendPayload"]
