"""Cache keys: plain strings, tuples and composite keys."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

_SEPARATOR = ":"
_MAX_TUPLE_PARTS = 4


class CacheKey(ABC):
    """Something that can name a cache entry."""

    @abstractmethod
    def cache_key(self) -> str:
        """The key string, without namespace."""

    def namespace(self) -> Optional[str]:
        """Optional namespace placed in front of the key."""
        return None

    def full_key(self) -> str:
        """The key including its namespace, if any."""
        ns = self.namespace()
        key = self.cache_key()
        return key if ns is None else f"{ns}{_SEPARATOR}{key}"


def key_string(key: Any) -> str:
    """The key string of a str, a tuple of one to four parts, or a CacheKey."""
    if isinstance(key, str):
        return key
    if isinstance(key, CacheKey):
        return key.cache_key()
    if isinstance(key, tuple):
        if not 1 <= len(key) <= _MAX_TUPLE_PARTS:
            raise TypeError(
                f"tuple keys need 1 to {_MAX_TUPLE_PARTS} parts, got {len(key)}"
            )
        return _SEPARATOR.join(str(part) for part in key)
    raise TypeError(f"{type(key).__name__} cannot be used as a cache key")


def full_key_string(key: Any) -> str:
    """Like :func:`key_string`, but including a CacheKey's namespace."""
    if isinstance(key, CacheKey):
        return key.full_key()
    return key_string(key)


class CompositeKey(CacheKey):
    """A key built from parts joined by ':' with an optional namespace."""

    __slots__ = ("_parts", "_ns")

    def __init__(self) -> None:
        self._parts: tuple[str, ...] = ()
        self._ns: Optional[str] = None

    def _copy(self, parts: tuple[str, ...], ns: Optional[str]) -> CompositeKey:
        clone = CompositeKey()
        clone._parts = parts
        clone._ns = ns
        return clone

    def with_namespace(self, ns: str) -> CompositeKey:
        """Return a key with the namespace set."""
        return self._copy(self._parts, str(ns))

    def part(self, part: Any) -> CompositeKey:
        """Return a key with one more part."""
        return self._copy((*self._parts, str(part)), self._ns)

    def parts(self, parts: Iterable[Any]) -> CompositeKey:
        """Return a key with several more parts."""
        return self._copy((*self._parts, *map(str, parts)), self._ns)

    def cache_key(self) -> str:
        return _SEPARATOR.join(self._parts)

    def namespace(self) -> Optional[str]:
        return self._ns

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeKey):
            return NotImplemented
        return self._parts == other._parts and self._ns == other._ns

    def __hash__(self) -> int:
        return hash((self._parts, self._ns))

    def __repr__(self) -> str:
        return f"CompositeKey(parts={list(self._parts)!r}, namespace={self._ns!r})"