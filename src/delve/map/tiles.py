from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tile:
    """A single map cell.

    ``blocked`` stops movement, ``block_sight`` stops vision. Generation always
    sets both together. ``explored`` flips to True the first time the tile is
    seen and never goes back.
    """

    blocked: bool
    block_sight: bool
    explored: bool = False

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, block_sight=True)

    @classmethod
    def empty(cls) -> "Tile":
        return cls(blocked=False, block_sight=False)

    @property
    def passable(self) -> bool:
        return not self.blocked

    def mark_explored(self) -> None:
        self.explored = True


__all__ = ["Tile"]
