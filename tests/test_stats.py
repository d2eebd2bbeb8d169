import pytest

from skpcache.stats import CacheStats


def test_default_stats():
    stats = CacheStats()
    assert stats.hits == 0
    assert stats.misses == 0
    assert stats.hit_ratio() == 0.0


def test_hit_ratio():
    stats = CacheStats(hits=80, misses=20)
    assert stats.hit_ratio() == pytest.approx(0.8)
    assert stats.miss_ratio() == pytest.approx(0.2)


def test_total_requests():
    assert CacheStats(hits=100, misses=50).total_requests() == 150


def test_miss_ratio_with_no_requests():
    assert CacheStats().miss_ratio() == 1.0


def test_merge():
    stats = CacheStats(hits=1, misses=2, stale_hits=3, writes=4, deletes=5, evictions=6, size=10, memory_bytes=100)
    other = CacheStats(hits=10, misses=20, stale_hits=30, writes=40, deletes=50, evictions=60, size=7, memory_bytes=70)
    stats.merge(other)
    assert stats == CacheStats(
        hits=11, misses=22, stale_hits=33, writes=44, deletes=55, evictions=66, size=7, memory_bytes=70
    )