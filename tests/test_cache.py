"""Tests for cache module."""

import threading
import time
import pytest
from hypothesis import given, strategies as st

from arbor.core.cache import LRUCache, Stats


def test_lru_basic():
    """Test basic cache operations."""
    cache = LRUCache[str](max_size=3)

    cache.set("a", "value_a")
    cache.set("b", "value_b")
    cache.set("c", "value_c")

    assert cache.get("a") == "value_a"
    assert cache.get("b") == "value_b"
    assert cache.get("c") == "value_c"
    assert len(cache) == 3


def test_lru_eviction():
    """Test LRU eviction on size limit."""
    cache = LRUCache[str](max_size=2)

    cache.set("a", "value_a")
    cache.set("b", "value_b")
    cache.set("c", "value_c")  # Should evict "a"

    assert cache.get("a") is None
    assert cache.get("b") == "value_b"
    assert cache.get("c") == "value_c"
    assert cache.stats.evictions == 1


def test_lru_order():
    """Test LRU ordering (most recently used stays)."""
    cache = LRUCache[str](max_size=2)

    cache.set("a", "value_a")
    cache.set("b", "value_b")

    # Access "a" to make it most recent
    _ = cache.get("a")

    # Add "c" - should evict "b" (least recent)
    cache.set("c", "value_c")

    assert cache.get("a") == "value_a"
    assert cache.get("b") is None
    assert cache.get("c") == "value_c"


def test_lru_ttl():
    """Test TTL expiration."""
    cache = LRUCache[str](max_size=10, ttl_seconds=0.05)

    cache.set("key", "value")
    assert cache.get("key") == "value"

    time.sleep(0.1)

    assert cache.get("key") is None
    assert len(cache) == 0


def test_lru_ttl_change_applies_to_existing_entries():
    """Shortening the TTL expires entries stored earlier."""
    cache = LRUCache[str](max_size=10, ttl_seconds=3600)
    cache.set("key", "value")

    cache.ttl_seconds = 0

    assert cache.get("key") is None


def test_lru_delete():
    """Test deletion."""
    cache = LRUCache[str](max_size=10)

    cache.set("key", "value")
    assert cache.delete("key") is True
    assert cache.get("key") is None
    assert cache.delete("key") is False  # Already deleted


def test_lru_clear():
    """Test clearing cache."""
    cache = LRUCache[str](max_size=10)

    cache.set("a", "value_a")
    cache.set("b", "value_b")

    cache.clear()

    assert len(cache) == 0
    assert cache.stats.size == 0
    assert "a" not in cache


def test_get_or_load():
    """Loader runs once; later calls are served from the cache."""
    cache = LRUCache[str](max_size=10)
    calls = []

    def loader():
        calls.append(1)
        return "loaded"

    assert cache.get_or_load("key", loader) == "loaded"
    assert cache.get_or_load("key", loader) == "loaded"
    assert len(calls) == 1


def test_get_or_load_does_not_cache_none():
    """A None result is returned but not stored."""
    cache = LRUCache[str](max_size=10)

    assert cache.get_or_load("key", lambda: None) is None
    assert "key" not in cache


def test_invalid_size():
    """Test non-positive size is rejected."""
    with pytest.raises(ValueError):
        LRUCache[str](max_size=0)


def test_stats_hit_miss():
    """Test statistics tracking."""
    cache = LRUCache[str](max_size=10)

    cache.set("key", "value")

    _ = cache.get("key")  # Hit
    _ = cache.get("missing")  # Miss

    assert cache.stats.hits == 1
    assert cache.stats.misses == 1
    assert cache.stats.hit_rate == 0.5


def test_stats_to_dict():
    """Test stats export."""
    stats = Stats(size=1, max_size=10, hits=3, misses=1)

    exported = stats.to_dict()

    assert exported["hit_rate"] == 0.75
    assert exported["max_size"] == 10


def test_concurrent_writers():
    """Concurrent writers never exceed the size limit."""
    cache = LRUCache[int](max_size=50)

    def writer(offset):
        for i in range(200):
            cache.set(f"{offset}-{i}", i)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 50


@given(st.lists(st.text(min_size=1, max_size=20), min_size=1, max_size=50))
def test_size_never_exceeds_max(keys):
    """Property test: cache size bounded by max_size."""
    cache = LRUCache[str](max_size=10)

    for key in keys:
        cache.set(key, key)

    assert len(cache) <= 10
