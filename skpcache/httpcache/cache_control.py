"""Parsing of the Cache-Control header."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

_U64_MAX = 2**64 - 1
_NUMBER = re.compile(r"\+?[0-9]+", re.ASCII)

_FLAGS = {
    "no-cache": "no_cache",
    "no-store": "no_store",
    "private": "private",
    "public": "public",
    "must-revalidate": "must_revalidate",
}

_DURATIONS = (
    ("max-age=", "max_age"),
    ("s-maxage=", "s_maxage"),
    ("stale-while-revalidate=", "stale_while_revalidate"),
)


def _seconds(text: str) -> Optional[timedelta]:
    if not _NUMBER.fullmatch(text):
        return None
    secs = int(text)
    if secs > _U64_MAX:
        return None
    try:
        return timedelta(seconds=secs)
    except OverflowError:
        return timedelta.max


@dataclass
class CacheControl:
    """Directives of a Cache-Control header."""

    max_age: Optional[timedelta] = None
    s_maxage: Optional[timedelta] = None
    no_cache: bool = False
    no_store: bool = False
    private: bool = False
    public: bool = False
    must_revalidate: bool = False
    stale_while_revalidate: Optional[timedelta] = None

    @classmethod
    def parse(cls, header: str) -> CacheControl:
        """Parse a header value; unknown or malformed directives are ignored."""
        cc = cls()
        for raw in header.split(","):
            directive = raw.strip()
            flag = _FLAGS.get(directive.lower()) if directive.isascii() else None
            if flag is not None:
                setattr(cc, flag, True)
                continue
            for prefix, attr in _DURATIONS:
                if directive.startswith(prefix):
                    value = _seconds(directive[len(prefix):])
                    if value is not None:
                        setattr(cc, attr, value)
                    break
        return cc