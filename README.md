# skpcache

Building blocks for caches: typed entries with TTL and
stale-while-revalidate, a fluent options builder, keys built from
strings, tuples, composite parts or dataclass fields, JSON and
MessagePack serializers, zstd compression, metrics hooks, abstract async
backend interfaces and HTTP caching helpers.

## Installation

```
pip install skpcache
```

To work on the package and run its tests:

```
pip install -e ".[test]"
pytest
```

## Entries and results

```python
from datetime import timedelta
from skpcache.entry import CacheEntry
from skpcache.result import CacheResult

entry = CacheEntry.with_ttl("hello", 5, timedelta(seconds=60))
entry.is_expired()        # False
entry.ttl_remaining()     # a little under 60 seconds
entry.age()               # time since creation

result = CacheResult.hit(entry)
result.is_usable()             # True
result.map(str.upper).value()  # "HELLO"
CacheResult.miss().value()     # None
```

An entry is stale when its TTL has passed but it is still inside its
`stale_while_revalidate` window. `CacheResult` has four kinds, listed in
`ResultKind`: `HIT`, `STALE`, `MISS` and `NEGATIVE_HIT`.

## Options

```python
from datetime import timedelta
from skpcache.options import CacheOpts, CacheOptions

opts = (
    CacheOpts()
    .ttl_secs(60)
    .swr_secs(30)
    .tags(["users", "profiles"])
    .tag("v2")
    .cost(100)
    .early_refresh()
    .build()
)

CacheOptions.from_ttl(timedelta(minutes=5))
```

Each builder call returns a new `CacheOpts`. The builder also has
`ttl`, `ttl_mins`, `swr`, `depends_on`, `coalesce`, `etag`, `negative`
and `if_version`.

## Keys

```python
from dataclasses import dataclass, field
from skpcache.keys import CompositeKey, key_string, full_key_string
from skpcache.derive import derive_cache_key

key = CompositeKey().with_namespace("myapp").part("user").part(123)
key.full_key()                  # "myapp:user:123"
key_string(("org", 1, "user"))  # "org:1:user"
full_key_string(key)            # "myapp:user:123"

@derive_cache_key(namespace="users", skip=["note"])
@dataclass
class UserKey:
    org: int
    user: str
    note: str = ""
    trace: str = field(default="", metadata={"cache_key": "skip"})

UserKey(1, "ann").full_key()    # "users:1:ann"
```

`key_string` accepts a `str`, a `CacheKey`, or a tuple of one to four
parts, and raises `TypeError` for anything else. `derive_cache_key` only
works on dataclasses. It joins the fields in the order they are defined,
using `separator` (default `":"`). It leaves out the fields named in
`skip` and the fields marked with `metadata={"cache_key": "skip"}`.

## Serializers and compression

```python
from skpcache.serializer import JsonSerializer, MsgPackSerializer
from skpcache.compression import ZstdCompressor, NoopCompressor

data = JsonSerializer().serialize([1, 2, 3])
JsonSerializer().deserialize(data)   # [1, 2, 3]

zstd = ZstdCompressor(3)
if zstd.should_compress(data):
    data = zstd.compress(data)
```

Both serializers also encode dataclass instances, as dicts.
`ZstdCompressor` only compresses payloads of at least 256 bytes; use
`with_min_size` to change that limit. Levels are clamped to the range
1–22. `NoopCompressor` returns data unchanged and never asks for
compression.

## Errors

Every failure raises a subclass of `skpcache.errors.CacheError`. Among
them are `KeyNotFoundError`, `SerializationError`,
`DeserializationError`, `CompressionError`, `DecompressionError`,
`VersionMismatchError` (which has `expected` and `actual`),
`CapacityExceededError` and `CacheTimeoutError`.

## Metrics

Implement `skpcache.metrics.CacheMetrics` to report hits, misses, stale
hits, latencies, evictions and sizes to your own system. The labels come
from `CacheTier`, `CacheOperation` and `EvictionReason`, each with
`as_str()`. `NoopMetrics` discards every event.
`skpcache.logging_metrics.LoggingMetrics` writes events to the
`skpcache` logger. Hits, misses, stale hits and evictions are logged at
DEBUG. Latency and size updates are logged at level 5, which sits below
DEBUG.

## Backends

`skpcache.backend.CacheBackend` is the async interface for storage
backends. `TaggableBackend`, `DependencyBackend` and `DistributedBackend`
extend it with tag, dependency, locking and invalidation operations.

## HTTP caching

```python
from skpcache.httpcache.cache_control import CacheControl
from skpcache.httpcache.policy import HttpCachePolicy, is_cacheable
from skpcache.httpcache.response import CachedResponse

cc = CacheControl.parse("public, max-age=60")
is_cacheable(200, cc)                   # True
HttpCachePolicy().effective_ttl(cc)     # timedelta(seconds=60)

resp = CachedResponse.from_parts(200, {"content-type": "text/plain"}, b"hi")
resp.headers_map()                      # {"content-type": "text/plain"}
```

`effective_ttl` picks `s-maxage` first, then `max-age`, then the
policy's default. When `ignore_upstream_cache_control` is set, it uses
only the default. `is_cacheable` accepts only status 200 without
`no-store` or `private`.

## What this package does not do

It defines interfaces and value types only. It has no storage backend:
no in-memory store and no Redis client implement `CacheBackend`. It has
no cache manager that connects backends, serializers and metrics, and
no web-framework middleware applying the HTTP helpers to requests.