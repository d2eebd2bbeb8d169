import pytest

from skpcache.entry import CacheEntry
from skpcache.result import CacheResult, ResultKind


def test_hit():
    result = CacheResult.hit(CacheEntry(42, 4))
    assert result.is_hit()
    assert result.is_usable()
    assert not result.is_miss()
    assert not result.is_stale()


def test_miss():
    result = CacheResult.miss()
    assert not result.is_hit()
    assert not result.is_usable()
    assert result.is_miss()
    assert result.value() is None
    assert result.entry() is None


def test_value_extraction():
    result = CacheResult.hit(CacheEntry(42, 4))
    assert result.value() == 42


def test_map():
    result = CacheResult.hit(CacheEntry(42, 4))
    mapped = result.map(lambda v: v * 2)
    assert mapped.value() == 84
    assert mapped.is_hit()


def test_stale_is_usable():
    result = CacheResult.stale(CacheEntry("x", 1))
    assert result.is_stale()
    assert result.is_usable()
    assert not result.is_hit()
    assert result.value() == "x"


def test_negative_hit():
    result = CacheResult.negative_hit()
    assert result.kind is ResultKind.NEGATIVE_HIT
    assert not result.is_usable()
    assert not result.is_miss()
    assert result.value() is None


def test_entry_returns_same_entry():
    entry = CacheEntry(7, 1)
    assert CacheResult.stale(entry).entry() is entry


def test_map_keeps_metadata_and_kind():
    entry = CacheEntry(3, 8, tags=["a"], version=5, etag="e1")
    mapped = CacheResult.stale(entry).map(str)
    new_entry = mapped.entry()
    assert mapped.is_stale()
    assert new_entry.value == "3"
    assert new_entry.tags == ["a"]
    assert new_entry.version == 5
    assert new_entry.etag == "e1"
    assert new_entry.created_at == entry.created_at
    assert entry.value == 3


def test_map_on_miss_stays_miss():
    mapped = CacheResult.miss().map(lambda v: v + 1)
    assert mapped.is_miss()
    assert CacheResult.negative_hit().map(str).kind is ResultKind.NEGATIVE_HIT


def test_hit_requires_entry():
    with pytest.raises(ValueError):
        CacheResult(ResultKind.HIT)


def test_miss_rejects_entry():
    with pytest.raises(ValueError):
        CacheResult(ResultKind.MISS, CacheEntry(1, 1))


def test_equality():
    entry = CacheEntry(1, 1)
    assert CacheResult.hit(entry) == CacheResult.hit(entry)
    assert CacheResult.miss() == CacheResult.miss()
    assert not (CacheResult.hit(entry) == CacheResult.stale(entry))