"""Metrics sink that reports cache events through the logging module."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from .metrics import CacheMetrics, CacheOperation, CacheTier, EvictionReason

LOGGER_NAME = "skpcache"
TRACE = 5
"""Level below DEBUG used for latency and size events."""

_logger = logging.getLogger(LOGGER_NAME)


class LoggingMetrics(CacheMetrics):
    """Logs each cache event with its fields attached to the record."""

    __slots__ = ("service_name",)

    def __init__(self, service_name: Optional[str] = None) -> None:
        self.service_name = service_name

    def with_service_name(self, name: str) -> LoggingMetrics:
        """Return a copy that tags events with ``name``."""
        return LoggingMetrics(str(name))

    def _log(self, level: int, message: str, **fields) -> None:
        fields["service"] = self.service_name
        if _logger.isEnabledFor(level):
            details = " ".join(f"{k}={v}" for k, v in fields.items())
            _logger.log(level, "%s %s", message, details, extra=fields)

    def record_hit(self, key: str, tier: CacheTier) -> None:
        self._log(logging.DEBUG, "Cache Hit", event="hit", key=key, tier=tier.name)

    def record_miss(self, key: str) -> None:
        self._log(logging.DEBUG, "Cache Miss", event="miss", key=key)

    def record_stale_hit(self, key: str) -> None:
        self._log(logging.DEBUG, "Cache Stale Hit", event="stale_hit", key=key)

    def record_latency(self, operation: CacheOperation, duration: timedelta) -> None:
        self._log(
            TRACE,
            "Cache Operation Latency",
            event="latency",
            operation=operation.name,
            duration_ms=duration // timedelta(milliseconds=1),
        )

    def record_eviction(self, reason: EvictionReason) -> None:
        self._log(logging.DEBUG, "Cache Eviction", event="eviction", reason=reason.name)

    def record_size(self, size: int, memory_bytes: int) -> None:
        self._log(
            TRACE,
            "Cache Size Update",
            event="size",
            size=size,
            bytes=memory_bytes,
        )

    def __repr__(self) -> str:
        return f"LoggingMetrics(service_name={self.service_name!r})"