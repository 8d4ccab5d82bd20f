"""In-memory TTL cache used by the repositories."""

from .entry import CacheEntry
from .manager import CacheManager
from .settings import DEFAULT_TTL, CacheSettings

__all__ = ["CacheEntry", "CacheManager", "CacheSettings", "DEFAULT_TTL"]
