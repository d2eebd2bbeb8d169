"""Exception hierarchy for cache operations."""

from __future__ import annotations


class CacheError(Exception):
    """Base class for every error raised by cache operations."""


class _DetailError(CacheError):
    """A cache error whose message is a fixed prefix followed by a detail."""

    prefix = "cache error"

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.prefix}: {detail}")
        self.detail = detail

    def __reduce__(self):
        return (type(self), (self.detail,))


class _FixedMessageError(CacheError):
    """A cache error with a message that never varies."""

    message = "cache error"

    def __init__(self) -> None:
        super().__init__(self.message)

    def __reduce__(self):
        return (type(self), ())


class KeyNotFoundError(_DetailError):
    """The key is not in the cache."""

    prefix = "key not found"


class SerializationError(_DetailError):
    """A value could not be turned into bytes."""

    prefix = "serialization error"


class DeserializationError(_DetailError):
    """Bytes could not be turned back into a value."""

    prefix = "deserialization error"


class BackendConnectionError(_DetailError):
    """The connection to a backend failed."""

    prefix = "connection error"


class BackendError(_DetailError):
    """A backend operation failed."""

    prefix = "backend error"


class CyclicDependencyError(_DetailError):
    """A dependency cycle was found starting at a key."""

    prefix = "cyclic dependency detected for key"


class LockConflictError(_DetailError):
    """A lock on a key could not be acquired."""

    prefix = "lock conflict for key"


class InternalCacheError(_DetailError):
    """An unexpected internal failure."""

    prefix = "internal error"


class CompressionError(_DetailError):
    """Compressing a value failed."""

    prefix = "compression error"


class DecompressionError(_DetailError):
    """Decompressing a value failed."""

    prefix = "decompression error"


class CapacityExceededError(_FixedMessageError):
    """The cache has no room for the entry."""

    message = "capacity exceeded"


class CacheTimeoutError(_FixedMessageError):
    """The operation did not finish in time."""

    message = "operation timed out"


class VersionMismatchError(CacheError):
    """A conditional write saw a different version than expected."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"version mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual

    def __reduce__(self):
        return (type(self), (self.expected, self.actual))