"""Pluggable serialization of cached values."""

from __future__ import annotations

import dataclasses
import json
from abc import ABC, abstractmethod
from typing import Any

import msgpack

from .errors import DeserializationError, SerializationError


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not serializable")


class Serializer(ABC):
    """Turns values into bytes and back."""

    name: str = ""

    @abstractmethod
    def serialize(self, value: Any) -> bytes:
        """Encode ``value`` as bytes."""

    @abstractmethod
    def deserialize(self, data: bytes) -> Any:
        """Decode bytes produced by :meth:`serialize`."""


class JsonSerializer(Serializer):
    """Compact JSON; human readable and widely compatible."""

    name = "json"

    def serialize(self, value: Any) -> bytes:
        try:
            text = json.dumps(value, separators=(",", ":"), default=_encode_default)
        except (TypeError, ValueError, RecursionError) as exc:
            raise SerializationError(str(exc)) from exc
        return text.encode("utf-8")

    def deserialize(self, data: bytes) -> Any:
        try:
            return json.loads(bytes(data))
        except ValueError as exc:
            raise DeserializationError(str(exc)) from exc

    def __repr__(self) -> str:
        return "JsonSerializer()"


class MsgPackSerializer(Serializer):
    """MessagePack; more compact than JSON, not human readable."""

    name = "msgpack"

    def serialize(self, value: Any) -> bytes:
        try:
            return msgpack.packb(value, use_bin_type=True, default=_encode_default)
        except (TypeError, ValueError, OverflowError) as exc:
            raise SerializationError(str(exc)) from exc

    def deserialize(self, data: bytes) -> Any:
        try:
            return msgpack.unpackb(bytes(data), raw=False)
        except (ValueError, TypeError, msgpack.UnpackException) as exc:
            raise DeserializationError(str(exc)) from exc

    def __repr__(self) -> str:
        return "MsgPackSerializer()"