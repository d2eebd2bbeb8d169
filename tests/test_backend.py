from __future__ import annotations

from datetime import timedelta

import pytest

from skpcache.backend import (
    CacheBackend,
    DependencyBackend,
    DistributedBackend,
    TaggableBackend,
)
from skpcache.entry import CacheEntry
from skpcache.options import CacheOptions
from skpcache.stats import CacheStats


class DictBackend(DependencyBackend):
    def __init__(self):
        self.data: dict[str, CacheEntry[bytes]] = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, options):
        entry = CacheEntry(value, len(value), ttl=options.ttl)
        entry.dependencies = list(options.dependencies)
        self.data[key] = entry

    async def delete(self, key):
        return self.data.pop(key, None) is not None

    async def exists(self, key):
        return key in self.data

    async def delete_many(self, keys):
        return sum([await self.delete(k) for k in keys])

    async def get_many(self, keys):
        return [self.data.get(k) for k in keys]

    async def set_many(self, entries):
        for key, value, options in entries:
            await self.set(key, value, options)

    async def clear(self):
        self.data.clear()

    async def stats(self):
        return CacheStats(size=len(self.data))

    async def length(self):
        return len(self.data)

    async def get_dependents(self, key):
        return [k for k, e in self.data.items() if key in e.dependencies]


def test_abstract_classes_cannot_be_instantiated():
    for cls in (CacheBackend, TaggableBackend, DependencyBackend, DistributedBackend):
        with pytest.raises(TypeError):
            cls()

    class Partial(DependencyBackend):
        async def length(self):
            return 0

    with pytest.raises(TypeError):
        Partial()
    assert "get_dependents" in DependencyBackend.__abstractmethods__
    assert "is_empty" not in CacheBackend.__abstractmethods__


@pytest.mark.asyncio
async def test_is_empty_follows_length():
    backend = DictBackend()
    assert await CacheBackend.is_empty(backend) is True
    await backend.set("a", b"1", CacheOptions())
    assert await CacheBackend.is_empty(backend) is False
    await backend.clear()
    assert await CacheBackend.is_empty(backend) is True


@pytest.mark.asyncio
async def test_dependents_and_many_operations():
    backend = DictBackend()
    dependent = CacheOptions(dependencies=["b"])
    assert dependent.dependencies == ["b"]
    await backend.set_many(
        [
            ("b", b"x", CacheOptions()),
            ("a", b"y", dependent),
        ]
    )
    assert await backend.get_dependents("b") == ["a"]
    got = await backend.get_many(["a", "missing", "b"])
    assert [e.value if e else None for e in got] == [b"y", None, b"x"]
    assert [e.is_expired() for e in got if e] == [False, False]
    assert await CacheBackend.is_empty(backend) is False
    assert await backend.delete_many(["a", "b", "missing"]) == 2
    assert await CacheBackend.is_empty(backend) is True


@pytest.mark.asyncio
async def test_set_keeps_ttl():
    backend = DictBackend()
    await backend.set("k", b"v", CacheOptions.from_ttl(timedelta(seconds=60)))
    entry = await backend.get("k")
    assert entry.ttl == timedelta(seconds=60)
    assert await backend.exists("k") is True