"""The outcome of a cache lookup."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from .entry import CacheEntry

T = TypeVar("T")
U = TypeVar("U")


class ResultKind(Enum):
    """The kinds of outcome a lookup can have."""

    HIT = "hit"
    STALE = "stale"
    MISS = "miss"
    NEGATIVE_HIT = "negative_hit"


_WITH_ENTRY = frozenset({ResultKind.HIT, ResultKind.STALE})


class CacheResult(Generic[T]):
    """A fresh hit, a stale hit, a miss, or a negative hit."""

    __slots__ = ("kind", "_entry")

    def __init__(self, kind: ResultKind, entry: Optional[CacheEntry[T]] = None) -> None:
        if kind in _WITH_ENTRY and entry is None:
            raise ValueError(f"a {kind.value} result needs an entry")
        if kind not in _WITH_ENTRY and entry is not None:
            raise ValueError(f"a {kind.value} result carries no entry")
        self.kind = kind
        self._entry = entry

    @classmethod
    def hit(cls, entry: CacheEntry[T]) -> CacheResult[T]:
        """A fresh hit."""
        return cls(ResultKind.HIT, entry)

    @classmethod
    def stale(cls, entry: CacheEntry[T]) -> CacheResult[T]:
        """A stale hit, still usable within its revalidation window."""
        return cls(ResultKind.STALE, entry)

    @classmethod
    def miss(cls) -> CacheResult[T]:
        """A cache miss."""
        return cls(ResultKind.MISS)

    @classmethod
    def negative_hit(cls) -> CacheResult[T]:
        """A negative hit: the value is known to be missing."""
        return cls(ResultKind.NEGATIVE_HIT)

    def is_hit(self) -> bool:
        """Whether this is a fresh hit."""
        return self.kind is ResultKind.HIT

    def is_miss(self) -> bool:
        """Whether this is a miss."""
        return self.kind is ResultKind.MISS

    def is_usable(self) -> bool:
        """Whether a value is available (fresh or stale)."""
        return self.kind in _WITH_ENTRY

    def is_stale(self) -> bool:
        """Whether this is a stale hit needing revalidation."""
        return self.kind is ResultKind.STALE

    def value(self) -> Optional[T]:
        """The cached value, or None when there is none."""
        return self._entry.value if self._entry is not None else None

    def entry(self) -> Optional[CacheEntry[T]]:
        """The full entry, or None when there is none."""
        return self._entry

    def map(self, func: Callable[[T], U]) -> CacheResult[U]:
        """Apply ``func`` to the value, keeping the kind and metadata."""
        if self._entry is None:
            return CacheResult(self.kind)
        entry = self._entry
        mapped = dataclasses.replace(
            entry,
            value=func(entry.value),
            tags=list(entry.tags),
            dependencies=list(entry.dependencies),
        )
        return CacheResult(self.kind, mapped)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CacheResult):
            return NotImplemented
        return self.kind is other.kind and self._entry == other._entry

    def __repr__(self) -> str:
        if self._entry is None:
            return f"CacheResult({self.kind.name})"
        return f"CacheResult({self.kind.name}, {self._entry!r})"