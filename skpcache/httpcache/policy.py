"""Decisions about what to cache and for how long."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import timedelta
from http import HTTPStatus
from typing import Iterable, Optional

from .cache_control import CacheControl


@dataclass
class HttpCachePolicy:
    """Configuration of HTTP caching behaviour."""

    ignore_upstream_cache_control: bool = False
    default_ttl: Optional[timedelta] = None
    vary_headers: list[str] = field(default_factory=list)
    bypass: bool = False
    tags: list[str] = field(default_factory=list)

    def ttl(self, ttl: timedelta) -> HttpCachePolicy:
        """Return a policy with ``ttl`` as the default TTL."""
        return dataclasses.replace(
            self, default_ttl=ttl, vary_headers=list(self.vary_headers), tags=list(self.tags)
        )

    def vary_by(self, headers: Iterable[str]) -> HttpCachePolicy:
        """Return a policy that also varies on ``headers``."""
        return dataclasses.replace(
            self,
            vary_headers=[*self.vary_headers, *map(str, headers)],
            tags=list(self.tags),
        )

    def effective_ttl(self, cc: CacheControl) -> Optional[timedelta]:
        """The TTL to use: s-maxage, then max-age, then the default."""
        if self.ignore_upstream_cache_control:
            return self.default_ttl
        if cc.s_maxage is not None:
            return cc.s_maxage
        if cc.max_age is not None:
            return cc.max_age
        return self.default_ttl


def is_cacheable(status: int, cc: CacheControl) -> bool:
    """Whether a response may be stored in a shared cache."""
    if status != HTTPStatus.OK:
        return False
    return not (cc.no_store or cc.private)