"""A cached value together with its metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

_ZERO = timedelta(0)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CacheEntry(Generic[T]):
    """A cached value with timing, tagging and versioning metadata."""

    value: T
    size: int = 0
    created_at: datetime = field(default_factory=_now)
    last_accessed: Optional[datetime] = None
    access_count: int = 0
    ttl: Optional[timedelta] = None
    stale_while_revalidate: Optional[timedelta] = None
    tags: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    cost: int = 1
    etag: Optional[str] = None
    version: int = 0

    def __post_init__(self) -> None:
        if self.last_accessed is None:
            self.last_accessed = self.created_at

    @classmethod
    def with_ttl(cls, value: T, size: int, ttl: timedelta) -> CacheEntry[T]:
        """Create an entry that expires ``ttl`` after creation."""
        return cls(value, size, ttl=ttl)

    def _elapsed(self) -> Optional[timedelta]:
        elapsed = _now() - self.created_at
        return elapsed if elapsed >= _ZERO else None

    def is_expired(self) -> bool:
        """Whether the TTL has passed."""
        if self.ttl is None:
            return False
        elapsed = self._elapsed()
        return elapsed is not None and elapsed > self.ttl

    def is_stale(self) -> bool:
        """Whether the entry is expired but within its stale-while-revalidate window."""
        if not self.is_expired():
            return False
        if self.ttl is None or self.stale_while_revalidate is None:
            return False
        elapsed = self._elapsed()
        return elapsed is not None and elapsed <= self.ttl + self.stale_while_revalidate

    def ttl_remaining(self) -> Optional[timedelta]:
        """Time left before expiry, or None without a TTL or once expired."""
        if self.ttl is None:
            return None
        elapsed = self._elapsed()
        if elapsed is None or elapsed > self.ttl:
            return None
        return self.ttl - elapsed

    def age(self) -> timedelta:
        """Time since creation; zero if the creation time lies in the future."""
        return self._elapsed() or _ZERO