"""Typed configuration values, the key/value store holding them, and the serializable interface."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, Iterator

_UINT32_MAX = 2**32 - 1
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class ValueKind(Enum):
    """The kinds of value a configuration entry can hold."""

    INT = auto()
    FLOAT = auto()
    BOOL = auto()
    UINT32 = auto()
    STRING = auto()
    FLOAT_LIST = auto()
    UINT32_LIST = auto()


def _float32(value: Any) -> float:
    """Round a number to single precision; raises OverflowError if it does not fit."""
    return struct.unpack("f", struct.pack("f", float(value)))[0]


def _uint32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"{value} is out of range for an unsigned 32-bit integer")
    return value


def _int32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"{value} is out of range for a signed 32-bit integer")
    return value


def _infer_kind(value: Any) -> ValueKind:
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.UINT32 if 0 <= value <= _UINT32_MAX else ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(v, int) and not isinstance(v, bool) for v in value):
            return ValueKind.UINT32_LIST
        return ValueKind.FLOAT_LIST
    raise TypeError(f"unsupported configuration value type: {type(value).__name__}")


def _normalize(value: Any, kind: ValueKind) -> Any:
    if kind is ValueKind.BOOL:
        if not isinstance(value, bool):
            raise TypeError(f"expected a bool, got {type(value).__name__}")
        return value
    if kind is ValueKind.INT:
        return _int32(value)
    if kind is ValueKind.UINT32:
        return _uint32(value)
    if kind is ValueKind.FLOAT:
        return _float32(value)
    if kind is ValueKind.STRING:
        if not isinstance(value, str):
            raise TypeError(f"expected a str, got {type(value).__name__}")
        return value
    if kind is ValueKind.FLOAT_LIST:
        return tuple(_float32(v) for v in value)
    return tuple(_uint32(v) for v in value)


class ConfigValue:
    """A single configuration value tagged with its kind."""

    __slots__ = ("_kind", "_value")

    def __init__(self, value: Any = 0, kind: ValueKind | None = None) -> None:
        if kind is None:
            kind = ValueKind.INT if value == 0 and type(value) is int else _infer_kind(value)
        self._kind = kind
        self._value = _normalize(value, kind)

    @property
    def kind(self) -> ValueKind:
        return self._kind

    @property
    def value(self) -> Any:
        """The held value; lists are returned as fresh lists."""
        if isinstance(self._value, tuple):
            return list(self._value)
        return self._value

    def get(self, kind: ValueKind) -> Any:
        """Return the value, which must be of the given kind."""
        if kind is not self._kind:
            raise TypeError(f"value holds {self._kind.name}, not {kind.name}")
        return self.value

    def is_kind(self, kind: ValueKind) -> bool:
        return kind is self._kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigValue):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._kind, self._value))

    def __repr__(self) -> str:
        return f"ConfigValue({self.value!r}, ValueKind.{self._kind.name})"


class Config:
    """A flat mapping of dotted keys to configuration values."""

    def __init__(self) -> None:
        self._entries: dict[str, ConfigValue] = {}

    def __getitem__(self, key: str) -> ConfigValue:
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"Config key not found: {key}") from None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str, kind: ValueKind) -> Any:
        """Return the value at key, which must exist and be of the given kind."""
        return self[key].get(kind)

    def get_optional(self, key: str, kind: ValueKind) -> Any | None:
        """Return the value at key, or None if it is missing or of another kind."""
        entry = self._entries.get(key)
        if entry is None or not entry.is_kind(kind):
            return None
        return entry.get(kind)

    def set(self, key: str, value: Any) -> None:
        """Store a value under key, wrapping plain values in a ConfigValue."""
        if not isinstance(value, ConfigValue):
            value = ConfigValue(value)
        self._entries[key] = value


class Serializable(ABC):
    """Something that can be written to and read from a Config."""

    @abstractmethod
    def serialize(self, out: Config) -> None:
        """Write this object's fields into out."""

    @abstractmethod
    def deserialize(self, config: Config) -> None:
        """Read this object's fields from config."""