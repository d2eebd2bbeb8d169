"""Counters describing cache activity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CacheStats:
    """Statistics for cache operations."""

    hits: int = 0
    misses: int = 0
    stale_hits: int = 0
    writes: int = 0
    deletes: int = 0
    evictions: int = 0
    size: int = 0
    memory_bytes: int = 0

    def hit_ratio(self) -> float:
        """Fraction of requests that were hits, 0.0 when there were none."""
        total = self.total_requests()
        return 0.0 if total == 0 else self.hits / total

    def miss_ratio(self) -> float:
        """One minus the hit ratio."""
        return 1.0 - self.hit_ratio()

    def total_requests(self) -> int:
        """Hits plus misses."""
        return self.hits + self.misses

    def merge(self, other: CacheStats) -> None:
        """Add ``other``'s counters; take its size and memory as the latest."""
        self.hits += other.hits
        self.misses += other.misses
        self.stale_hits += other.stale_hits
        self.writes += other.writes
        self.deletes += other.deletes
        self.evictions += other.evictions
        self.size = other.size
        self.memory_bytes = other.memory_bytes