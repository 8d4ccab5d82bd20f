from __future__ import annotations

import threading
import time

import pytest

from namemc.cache import CacheEntry, CacheManager, CacheSettings
from namemc.errors import InvalidArgumentError


def _manager(clock, *, ttl: float = 2.0, max_size: int | None = None) -> CacheManager[str, str]:
    return CacheManager(CacheSettings(ttl=ttl, max_size=max_size), clock=clock)


def test_get_returns_value_within_ttl(clock) -> None:
    cache = _manager(clock)
    cache.put("a", "va")
    assert cache.get("a") == "va"
    assert cache.get("missing") is None


def test_get_removes_expired_entry(clock) -> None:
    cache = _manager(clock)
    cache.put("a", "va")
    clock.advance(2.0)
    assert "a" in cache.get_cache()
    assert cache.get("a") is None
    assert "a" not in cache.get_cache()


def test_put_replaces_entry_and_restarts_ttl(clock) -> None:
    cache = _manager(clock)
    cache.put("a", "old")
    clock.advance(1.5)
    cache.put("a", "new")
    clock.advance(1.5)
    assert cache.get("a") == "new"


def test_lru_bound_of_one_keeps_latest_key(clock) -> None:
    cache = _manager(clock, max_size=1)
    cache.put("a", "va")
    cache.put("b", "vb")
    assert cache.get("a") is None
    assert cache.get("b") == "vb"
    assert len(cache) == 1


def test_get_refreshes_recency_when_bounded(clock) -> None:
    cache = _manager(clock, max_size=2)
    cache.put("a", "va")
    cache.put("b", "vb")
    assert cache.get("a") == "va"
    cache.put("c", "vc")
    assert cache.get("a") == "va"
    assert cache.get("b") is None
    assert cache.get("c") == "vc"


def test_eviction_ignores_remaining_ttl(clock) -> None:
    cache = _manager(clock, ttl=100.0, max_size=2)
    cache.put("a", "va")
    clock.advance(50)
    cache.put("b", "vb")
    cache.get("a")
    cache.put("c", "vc")
    assert set(cache.get_cache()) == {"a", "c"}


def test_unbounded_cache_keeps_everything(clock) -> None:
    cache = _manager(clock)
    for index in range(500):
        cache.put(f"k{index}", str(index))
    assert len(cache) == 500


def test_cleanup_removes_only_expired_entries(clock) -> None:
    short = _manager(clock, ttl=1.0)
    short.put("short", "s")
    long_lived = CacheManager[str, str](CacheSettings(ttl=10.0), clock=clock)
    long_lived.put("long", "l")
    short.put("other", "o")

    clock.advance(0.5)
    short.put("fresh", "f")
    clock.advance(0.5)

    assert short.cleanup() == 2
    assert set(short.get_cache()) == {"fresh"}
    assert long_lived.cleanup() == 0
    assert set(long_lived.get_cache()) == {"long"}


def test_remove_and_clear(clock) -> None:
    cache = _manager(clock)
    cache.put("a", "va")
    cache.put("b", "vb")
    cache.remove("a")
    cache.remove("a")
    assert cache.get("a") is None
    assert cache.get("b") == "vb"
    cache.clear()
    assert len(cache) == 0


def test_snapshot_is_a_read_only_copy(clock) -> None:
    cache = _manager(clock)
    cache.put("a", "va")
    snapshot = cache.get_cache()
    cache.put("b", "vb")
    assert set(snapshot) == {"a"}
    assert isinstance(snapshot["a"], CacheEntry)
    with pytest.raises(TypeError):
        snapshot["c"] = snapshot["a"]  # type: ignore[index]


def test_contains_does_not_evict_expired_entries(clock) -> None:
    cache = _manager(clock)
    cache.put("a", "va")
    assert "a" in cache
    clock.advance(3)
    assert "a" not in cache
    assert len(cache) == 1


def test_settings_are_exposed(clock) -> None:
    settings = CacheSettings(ttl=3, max_size=4)
    cache = CacheManager[str, str](settings, clock=clock)
    assert cache.get_cache_settings() is settings
    assert cache.settings is settings


def test_invalid_arguments_are_rejected(clock) -> None:
    cache = _manager(clock)
    with pytest.raises(InvalidArgumentError):
        cache.put(None, "v")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        cache.put("k", None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        cache.get(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        cache.remove(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        CacheManager(None)  # type: ignore[arg-type]


def test_entries_expire_in_real_time() -> None:
    cache = CacheManager[str, int](CacheSettings(ttl=0.05))
    cache.put("a", 42)
    assert cache.get("a") == 42
    time.sleep(0.06)
    assert cache.get("a") is None


def test_concurrent_puts_respect_bound(clock) -> None:
    cache = _manager(clock, max_size=16)
    barrier = threading.Barrier(8)

    def writer(offset: int) -> None:
        barrier.wait()
        for index in range(200):
            key = f"{offset}-{index}"
            cache.put(key, key)
            cache.get(key)
            if index % 7 == 0:
                cache.remove(key)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) <= 16
