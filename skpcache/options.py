"""Per-entry cache options and a fluent builder for them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Optional


@dataclass
class CacheOptions:
    """Configuration for a single cache entry."""

    ttl: Optional[timedelta] = None
    stale_while_revalidate: Optional[timedelta] = None
    tags: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    cost: Optional[int] = None
    early_refresh: bool = False
    coalesce: bool = False
    etag: Optional[str] = None
    negative: bool = False
    if_version: Optional[int] = None

    @classmethod
    def from_ttl(cls, ttl: timedelta) -> CacheOptions:
        """Options with only a TTL set."""
        return cls(ttl=ttl)


class CacheOpts:
    """Fluent builder for :class:`CacheOptions`; each call returns a new builder."""

    __slots__ = ("_options",)

    def __init__(self) -> None:
        self._options = CacheOptions()

    def _with(self, **changes) -> CacheOpts:
        clone = CacheOpts()
        clone._options = dataclasses.replace(self._options, **changes)
        return clone

    def ttl(self, duration: timedelta) -> CacheOpts:
        """Set the time-to-live."""
        return self._with(ttl=duration)

    def ttl_secs(self, seconds: int) -> CacheOpts:
        """Set the time-to-live in seconds."""
        return self.ttl(timedelta(seconds=seconds))

    def ttl_mins(self, minutes: int) -> CacheOpts:
        """Set the time-to-live in minutes."""
        return self.ttl(timedelta(seconds=minutes * 60))

    def swr(self, duration: timedelta) -> CacheOpts:
        """Set the stale-while-revalidate window."""
        return self._with(stale_while_revalidate=duration)

    def swr_secs(self, seconds: int) -> CacheOpts:
        """Set the stale-while-revalidate window in seconds."""
        return self.swr(timedelta(seconds=seconds))

    def tags(self, tags: Iterable[str]) -> CacheOpts:
        """Add several tags."""
        return self._with(tags=[*self._options.tags, *map(str, tags)])

    def tag(self, tag: str) -> CacheOpts:
        """Add one tag."""
        return self._with(tags=[*self._options.tags, str(tag)])

    def depends_on(self, keys: Iterable[str]) -> CacheOpts:
        """Add keys this entry depends on."""
        return self._with(dependencies=[*self._options.dependencies, *map(str, keys)])

    def cost(self, cost: int) -> CacheOpts:
        """Set the computation cost."""
        return self._with(cost=cost)

    def early_refresh(self) -> CacheOpts:
        """Enable early probabilistic refresh."""
        return self._with(early_refresh=True)

    def coalesce(self) -> CacheOpts:
        """Enable request coalescing."""
        return self._with(coalesce=True)

    def etag(self, etag: str) -> CacheOpts:
        """Set the ETag."""
        return self._with(etag=str(etag))

    def negative(self) -> CacheOpts:
        """Mark as a negative cache entry."""
        return self._with(negative=True)

    def if_version(self, version: int) -> CacheOpts:
        """Only set if the stored version matches."""
        return self._with(if_version=version)

    def build(self) -> CacheOptions:
        """Return the finished options."""
        return dataclasses.replace(
            self._options,
            tags=list(self._options.tags),
            dependencies=list(self._options.dependencies),
        )

    def __repr__(self) -> str:
        return f"CacheOpts({self._options!r})"