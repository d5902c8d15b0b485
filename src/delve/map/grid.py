from __future__ import annotations

import hashlib
import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..errors import OutOfBoundsError
from .tiles import Tile

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class TileGrid:
    """A fixed-size, bounds-checked 2D grid of :class:`Tile`.

    Every tile starts out as a wall. The dimensions never change after
    construction; generation carves passable tiles into it and the visibility
    step flips ``explored`` flags.

    Two flavours of access are offered:

    - ``get``/``set`` raise :class:`OutOfBoundsError` on bad coordinates so
      map authoring mistakes surface immediately.
    - ``is_passable``/``is_transparent``/``safe_get`` never raise; anything
      off-grid is treated as a solid wall.
    """

    __slots__ = ("_w", "_h", "_tiles")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("TileGrid dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        # tiles[y][x]
        self._tiles: List[List[Tile]] = [[Tile.wall() for _ in range(self._w)] for _ in range(self._h)]
        logger.debug("Initialized TileGrid %dx%d (all walls)", self._w, self._h)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._w and 0 <= y < self._h

    def get(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"Coordinates out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")
        return self._tiles[y][x]

    def safe_get(self, x: int, y: int) -> Optional[Tile]:
        if not self.in_bounds(x, y):
            return None
        return self._tiles[y][x]

    def set(self, x: int, y: int, tile: Tile) -> None:
        if not isinstance(tile, Tile):
            raise TypeError("tile must be a Tile instance")
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"Coordinates out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")
        self._tiles[y][x] = tile

    def carve(self, x: int, y: int) -> None:
        """Turn the tile at (x, y) into open floor."""
        self.set(x, y, Tile.empty())

    def is_passable(self, x: int, y: int) -> bool:
        tile = self.safe_get(x, y)
        if tile is None:
            return False
        return not tile.blocked

    def is_transparent(self, x: int, y: int) -> bool:
        tile = self.safe_get(x, y)
        if tile is None:
            return False
        return not tile.block_sight

    def is_explored(self, x: int, y: int) -> bool:
        tile = self.safe_get(x, y)
        return tile is not None and tile.explored

    def coords(self) -> Iterator[Coord]:
        for y in range(self._h):
            for x in range(self._w):
                yield (x, y)

    def count_passable(self) -> int:
        return sum(1 for row in self._tiles for t in row if not t.blocked)

    def count_explored(self) -> int:
        return sum(1 for row in self._tiles for t in row if t.explored)

    def signature(self) -> str:
        """Stable digest of the blocked/sight layout (explored state excluded)."""
        h = hashlib.blake2b(digest_size=16)
        h.update(f"{self._w}x{self._h}".encode("ascii"))
        for row in self._tiles:
            h.update(bytes((int(t.blocked) << 1) | int(t.block_sight) for t in row))
        return h.hexdigest()

    @classmethod
    def from_lines(cls, lines: Sequence[str], mapping: Optional[Dict[str, Tile]] = None) -> "TileGrid":
        """Create a grid from ASCII rows ('#' wall, '.' floor by default).

        Characters missing from ``mapping`` stay walls.
        """
        if not lines:
            raise ValueError("lines must not be empty")
        width = len(lines[0])
        if width == 0:
            raise ValueError("line width must be positive")
        for i, row in enumerate(lines):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")

        mapping = mapping or {".": Tile.empty(), "#": Tile.wall()}
        grid = cls(width, len(lines))
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                proto = mapping.get(ch)
                if proto is not None:
                    grid.set(x, y, Tile(proto.blocked, proto.block_sight))
        return grid

    def to_lines(self, wall: str = "#", floor: str = ".") -> List[str]:
        return [
            "".join(wall if t.blocked else floor for t in row)
            for row in self._tiles
        ]

    def __repr__(self) -> str:
        return f"TileGrid(width={self._w}, height={self._h})"


__all__ = ["Coord", "TileGrid"]
