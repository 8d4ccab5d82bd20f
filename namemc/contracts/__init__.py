"""Pydantic models describing the JSON records returned by the NameMC endpoints."""

from .friends import FriendPayload
from .likes import parse_like

__all__ = ["FriendPayload", "parse_like"]
