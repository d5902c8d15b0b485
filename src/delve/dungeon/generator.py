from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Tuple

from ..errors import GenerationConfigError
from ..map.grid import TileGrid
from ..map.position import Position
from ..rng import RandomLike
from .rect import Rect

logger = logging.getLogger(__name__)


class Tunnel(NamedTuple):
    """One straight corridor leg: ``axis`` is "h" or "v", ``fixed`` the other coordinate."""

    axis: str
    start: int
    end: int
    fixed: int

    def tiles(self) -> List[Tuple[int, int]]:
        lo, hi = min(self.start, self.end), max(self.start, self.end)
        if self.axis == "h":
            return [(x, self.fixed) for x in range(lo, hi + 1)]
        return [(self.fixed, y) for y in range(lo, hi + 1)]


@dataclass
class DungeonLayout:
    grid: TileGrid
    start: Position
    rooms: List[Rect] = field(default_factory=list)
    tunnels: List[Tunnel] = field(default_factory=list)
    rejected: int = 0

    @property
    def degenerate(self) -> bool:
        """True when no room was accepted; ``start`` is then the origin."""
        return not self.rooms


class RoomsGenerator:
    """Rooms + tunnels generator.

    Each of ``max_rooms`` attempts draws a random room and keeps it only if it
    does not touch any room accepted so far. A rejected room just burns the
    attempt, so the map may end up with fewer rooms. Every accepted room after
    the first is joined to the previous one by an L-shaped pair of tunnels
    whose bend is picked by a coin flip.
    """

    def __init__(self, max_rooms: int = 30, room_min_size: int = 6, room_max_size: int = 10) -> None:
        self.max_rooms = max_rooms
        self.room_min_size = room_min_size
        self.room_max_size = room_max_size

    def _validate(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise GenerationConfigError("map width/height must be > 0")
        if self.max_rooms < 0:
            raise GenerationConfigError("max_rooms must be >= 0")
        if self.room_min_size < 1:
            raise GenerationConfigError("room_min_size must be >= 1")
        if self.room_min_size > self.room_max_size:
            raise GenerationConfigError(
                f"room_min_size ({self.room_min_size}) exceeds room_max_size ({self.room_max_size})"
            )
        if self.room_max_size > min(width, height) - 1:
            raise GenerationConfigError(
                f"room_max_size {self.room_max_size} does not fit a {width}x{height} map"
            )

    def build(self, width: int, height: int, rng: RandomLike) -> DungeonLayout:
        self._validate(width, height)
        grid = TileGrid(width, height)
        layout = DungeonLayout(grid=grid, start=Position())

        for _ in range(self.max_rooms):
            w = rng.randint(self.room_min_size, self.room_max_size)
            h = rng.randint(self.room_min_size, self.room_max_size)
            # keeps x2 <= width - 1 so the outer ring is never carved
            x = rng.randint(0, width - w - 1)
            y = rng.randint(0, height - h - 1)
            new_room = Rect.new(x, y, w, h)

            if any(new_room.intersects(other) for other in layout.rooms):
                layout.rejected += 1
                continue

            self._carve_room(grid, new_room)
            new_x, new_y = new_room.center()

            if not layout.rooms:
                layout.start = Position(new_x, new_y)
            else:
                prev_x, prev_y = layout.rooms[-1].center()
                if rng.coin():
                    legs = (Tunnel("h", prev_x, new_x, prev_y), Tunnel("v", prev_y, new_y, new_x))
                else:
                    legs = (Tunnel("v", prev_y, new_y, prev_x), Tunnel("h", prev_x, new_x, new_y))
                for leg in legs:
                    self._carve_tunnel(grid, leg)
                layout.tunnels.extend(legs)

            layout.rooms.append(new_room)

        if layout.degenerate:
            logger.warning(
                "RoomsGenerator: no room accepted in %d attempts on %dx%d map; start defaults to %s",
                self.max_rooms,
                width,
                height,
                layout.start,
            )
        else:
            logger.info(
                "RoomsGenerator: %d rooms accepted, %d rejected; start at %s",
                len(layout.rooms),
                layout.rejected,
                layout.start,
            )
        return layout

    @staticmethod
    def _carve_room(grid: TileGrid, room: Rect) -> None:
        for x, y in room.interior():
            grid.carve(x, y)

    @staticmethod
    def _carve_tunnel(grid: TileGrid, leg: Tunnel) -> None:
        for x, y in leg.tiles():
            grid.carve(x, y)


def generate(
    width: int,
    height: int,
    max_rooms: int,
    room_min: int,
    room_max: int,
    rng: RandomLike,
) -> Tuple[TileGrid, Position]:
    """Generate a dungeon and return ``(grid, start_position)``."""
    layout = RoomsGenerator(max_rooms, room_min, room_max).build(width, height, rng)
    return layout.grid, layout.start


__all__ = ["DungeonLayout", "RoomsGenerator", "Tunnel", "generate"]
