"""Typed numeric handles that refer to registered assets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_UINT32_MAX = 2**32 - 1


@dataclass(frozen=True)
class AssetHandle(Generic[T]):
    """An opaque reference to an asset; id 0 means "no asset"."""

    id: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"handle id must be an integer, got {type(self.id).__name__}")
        if not 0 <= self.id <= _UINT32_MAX:
            raise ValueError(f"handle id {self.id} is out of range for an unsigned 32-bit integer")

    def is_valid(self) -> bool:
        """True when the handle refers to an asset."""
        return self.id != 0

    def __bool__(self) -> bool:
        return self.is_valid()