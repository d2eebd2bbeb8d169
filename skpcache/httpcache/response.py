"""A storable snapshot of an HTTP response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Union

_TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

HeaderSource = Union[Mapping[str, Union[str, bytes]], Iterable[tuple[str, Union[str, bytes]]]]


def _pairs(headers: HeaderSource):
    if isinstance(headers, Mapping):
        return headers.items()
    return headers


def _visible_text(value: Union[str, bytes]) -> Optional[str]:
    raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    if all(32 <= b < 127 or b == 9 for b in raw):
        return raw.decode("ascii")
    return None


def _valid_name(name: str) -> Optional[str]:
    if name and all(c in _TOKEN_CHARS for c in name):
        return name.lower()
    return None


def _valid_value(value: str) -> bool:
    return all((ord(c) >= 32 and ord(c) != 127) or c == "\t" for c in value)


@dataclass
class CachedResponse:
    """Status, headers and body of a response, ready to be cached."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    def from_parts(cls, status: int, headers: HeaderSource, body: bytes) -> CachedResponse:
        """Build from response parts; headers with non-visible bytes are dropped."""
        kept: dict[str, str] = {}
        for name, value in _pairs(headers):
            text = _visible_text(value)
            if text is not None:
                kept[str(name).lower()] = text
        return cls(int(status), kept, bytes(body))

    def headers_map(self) -> dict[str, str]:
        """Headers with lower-case names, leaving out invalid names or values."""
        result: dict[str, str] = {}
        for name, value in self.headers.items():
            valid = _valid_name(name)
            if valid is not None and _valid_value(value):
                result[valid] = value
        return result