from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Position:
    """Integer grid coordinates of an entity."""

    x: int = 0
    y: int = 0

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


__all__ = ["Position"]
