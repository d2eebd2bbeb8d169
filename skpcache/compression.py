"""Compression of cached values."""

from __future__ import annotations

import copy
import io
from abc import ABC, abstractmethod

import zstandard

from .errors import CompressionError, DecompressionError

DEFAULT_COMPRESSION_LEVEL = 3
"""Default zstd level (1-22, higher compresses better but slower)."""

MIN_COMPRESSION_SIZE = 256
"""Values shorter than this many bytes are not worth compressing."""

_MIN_LEVEL = 1
_MAX_LEVEL = 22
_READ_CHUNK = 64 * 1024


class Compressor(ABC):
    """A reversible byte transformation applied to cached values."""

    name: str = ""

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Return the compressed form of ``data``."""

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """Return the original bytes from compressed ``data``."""

    def should_compress(self, data: bytes) -> bool:
        """Whether ``data`` is large enough to be worth compressing."""
        return len(data) >= MIN_COMPRESSION_SIZE


class NoopCompressor(Compressor):
    """Compressor that leaves data untouched."""

    name = "none"

    def compress(self, data: bytes) -> bytes:
        return bytes(data)

    def decompress(self, data: bytes) -> bytes:
        return bytes(data)

    def should_compress(self, data: bytes) -> bool:
        return False

    def __repr__(self) -> str:
        return "NoopCompressor()"


class ZstdCompressor(Compressor):
    """Zstandard compressor with a clamped level and a size threshold."""

    name = "zstd"

    def __init__(self, level: int = DEFAULT_COMPRESSION_LEVEL) -> None:
        self._level = min(max(level, _MIN_LEVEL), _MAX_LEVEL)
        self.min_size = MIN_COMPRESSION_SIZE

    @property
    def level(self) -> int:
        """The compression level in use."""
        return self._level

    def with_min_size(self, size: int) -> ZstdCompressor:
        """Return a copy that compresses data of at least ``size`` bytes."""
        clone = copy.copy(self)
        clone.min_size = size
        return clone

    def compress(self, data: bytes) -> bytes:
        try:
            return zstandard.ZstdCompressor(level=self._level).compress(bytes(data))
        except zstandard.ZstdError as exc:
            raise CompressionError(str(exc)) from exc

    def decompress(self, data: bytes) -> bytes:
        dctx = zstandard.ZstdDecompressor()
        out = io.BytesIO()
        try:
            with dctx.stream_reader(io.BytesIO(bytes(data)), read_across_frames=True) as reader:
                for chunk in iter(lambda: reader.read(_READ_CHUNK), b""):
                    out.write(chunk)
        except zstandard.ZstdError as exc:
            raise DecompressionError(str(exc)) from exc
        return out.getvalue()

    def should_compress(self, data: bytes) -> bool:
        return len(data) >= self.min_size

    def __repr__(self) -> str:
        return f"ZstdCompressor(level={self._level}, min_size={self.min_size})"