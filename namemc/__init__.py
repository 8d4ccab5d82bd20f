"""Cached access to the NameMC profile-friends and server-likes endpoints."""

from .cache import CacheEntry, CacheManager, CacheSettings
from .errors import InvalidArgumentError, NameMCError, RemoteFetchError, ResponseFormatError
from .facade import NameMC
from .profile import Friend, Profile, ProfileRepository
from .repository import BaseRepository
from .server import Server, ServerRepository

__all__ = [
    "BaseRepository",
    "CacheEntry",
    "CacheManager",
    "CacheSettings",
    "Friend",
    "InvalidArgumentError",
    "NameMC",
    "NameMCError",
    "Profile",
    "ProfileRepository",
    "RemoteFetchError",
    "ResponseFormatError",
    "Server",
    "ServerRepository",
]
