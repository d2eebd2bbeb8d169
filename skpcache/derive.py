"""Class decorator that turns a dataclass into a cache key."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable, Optional, Union

from .keys import CacheKey

SKIP_METADATA = "cache_key"
"""Field metadata key; a field with ``metadata={"cache_key": "skip"}`` is left out."""


def _build(cls: type, namespace: Optional[str], separator: str, skip: Iterable[str]) -> type:
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError("derive_cache_key only supports dataclasses")
    fields = dataclasses.fields(cls)
    skipped = set(skip)
    unknown = skipped - {f.name for f in fields}
    if unknown:
        raise ValueError(f"unknown fields to skip: {', '.join(sorted(unknown))}")
    names = tuple(
        f.name
        for f in fields
        if f.name not in skipped and f.metadata.get(SKIP_METADATA) != "skip"
    )

    def cache_key(self) -> str:
        return separator.join(str(getattr(self, name)) for name in names)

    def namespace_of(self) -> Optional[str]:
        return namespace

    cls.cache_key = cache_key
    cls.namespace = namespace_of
    cls.full_key = CacheKey.full_key
    CacheKey.register(cls)
    return cls


def derive_cache_key(
    cls: Optional[type] = None,
    *,
    namespace: Optional[str] = None,
    separator: str = ":",
    skip: Iterable[str] = (),
) -> Union[type, Callable[[type], type]]:
    """Give a dataclass ``cache_key``, ``namespace`` and ``full_key`` methods.

    The key joins the string form of each field, in definition order, with
    ``separator``. Fields named in ``skip`` or marked with skip metadata are
    left out. Usable bare or with keyword arguments.
    """
    skip = tuple(skip)

    def decorate(target: Any) -> type:
        return _build(target, namespace, separator, skip)

    if cls is None:
        return decorate
    return decorate(cls)