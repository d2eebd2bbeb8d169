"""Observability hooks for cache operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from enum import Enum


class _Labelled(Enum):
    def as_str(self) -> str:
        """The label used for this member in metrics."""
        return self.value


class CacheTier(_Labelled):
    """Which cache tier served a hit."""

    L1_MEMORY = "l1_memory"
    L2_REDIS = "l2_redis"


class CacheOperation(_Labelled):
    """An operation whose latency is recorded."""

    GET = "get"
    SET = "set"
    DELETE = "delete"
    SERIALIZE = "serialize"
    DESERIALIZE = "deserialize"
    INVALIDATE = "invalidate"


class EvictionReason(_Labelled):
    """Why an entry left the cache."""

    EXPIRED = "expired"
    CAPACITY = "capacity"
    INVALIDATED = "invalidated"
    REPLACED = "replaced"
    DEPENDENCY_INVALIDATED = "dependency"


class CacheMetrics(ABC):
    """Receiver of cache events; implement to feed a metrics system."""

    @abstractmethod
    def record_hit(self, key: str, tier: CacheTier) -> None:
        """Record a cache hit."""

    @abstractmethod
    def record_miss(self, key: str) -> None:
        """Record a cache miss."""

    @abstractmethod
    def record_stale_hit(self, key: str) -> None:
        """Record a stale hit served while revalidating."""

    @abstractmethod
    def record_latency(self, operation: CacheOperation, duration: timedelta) -> None:
        """Record how long an operation took."""

    @abstractmethod
    def record_eviction(self, reason: EvictionReason) -> None:
        """Record an eviction."""

    @abstractmethod
    def record_size(self, size: int, memory_bytes: int) -> None:
        """Record the number of entries and memory in use."""


class NoopMetrics(CacheMetrics):
    """Metrics sink that discards every event."""

    def record_hit(self, key: str, tier: CacheTier) -> None:
        pass

    def record_miss(self, key: str) -> None:
        pass

    def record_stale_hit(self, key: str) -> None:
        pass

    def record_latency(self, operation: CacheOperation, duration: timedelta) -> None:
        pass

    def record_eviction(self, reason: EvictionReason) -> None:
        pass

    def record_size(self, size: int, memory_bytes: int) -> None:
        pass

    def __repr__(self) -> str:
        return "NoopMetrics()"