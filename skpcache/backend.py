"""Abstract storage backends for the cache."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Iterable, Optional, Sequence

from .entry import CacheEntry
from .options import CacheOptions
from .stats import CacheStats


class CacheBackend(ABC):
    """Operations every cache storage backend supports."""

    @abstractmethod
    async def get(self, key: str) -> Optional[CacheEntry[bytes]]:
        """Return the entry for ``key``, or None if missing or expired."""

    @abstractmethod
    async def set(self, key: str, value: bytes, options: CacheOptions) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove ``key``; True if it existed."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Whether ``key`` is present."""

    @abstractmethod
    async def delete_many(self, keys: Sequence[str]) -> int:
        """Remove several keys; return how many were removed."""

    @abstractmethod
    async def get_many(self, keys: Sequence[str]) -> list[Optional[CacheEntry[bytes]]]:
        """Return entries for ``keys`` in the same order."""

    @abstractmethod
    async def set_many(self, entries: Iterable[tuple[str, bytes, CacheOptions]]) -> None:
        """Store several ``(key, value, options)`` entries."""

    @abstractmethod
    async def clear(self) -> None:
        """Remove every entry."""

    @abstractmethod
    async def stats(self) -> CacheStats:
        """Return current statistics."""

    @abstractmethod
    async def length(self) -> int:
        """Return the number of entries."""

    async def is_empty(self) -> bool:
        """Whether the backend holds no entries."""
        return await self.length() == 0


class TaggableBackend(CacheBackend):
    """A backend that can look up and remove entries by tag."""

    @abstractmethod
    async def get_by_tag(self, tag: str) -> list[str]:
        """Return the keys carrying ``tag``."""

    @abstractmethod
    async def delete_by_tag(self, tag: str) -> int:
        """Remove entries carrying ``tag``; return how many were removed."""


class DependencyBackend(CacheBackend):
    """A backend that tracks dependencies between keys."""

    @abstractmethod
    async def get_dependents(self, key: str) -> list[str]:
        """Return keys that depend on ``key``.

        If key ``A`` depends on ``B``, ``get_dependents("B")`` returns ``["A"]``.
        """


class DistributedBackend(CacheBackend):
    """A backend shared between processes."""

    @abstractmethod
    async def acquire_lock(self, key: str, ttl: timedelta) -> str:
        """Take a lock on ``key`` for ``ttl``; return its token."""

    @abstractmethod
    async def release_lock(self, key: str, token: str) -> bool:
        """Release the lock held with ``token``; True if it was released."""

    @abstractmethod
    async def publish_invalidation(self, keys: Sequence[str]) -> None:
        """Tell other nodes that ``keys`` are invalid."""

    @abstractmethod
    async def subscribe_invalidations(self) -> None:
        """Start receiving invalidation messages."""