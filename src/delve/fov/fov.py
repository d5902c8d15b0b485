from __future__ import annotations

import logging
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from ..map.grid import Coord, TileGrid

logger = logging.getLogger(__name__)


class FovAlgorithm(str, Enum):
    LINE_OF_SIGHT = "los"  # one line per candidate tile
    RAYCAST = "raycast"  # rays from the viewer to the bounding box perimeter


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> List[Coord]:
    """
    Bresenham's line algorithm. Returns the list of points from (x0, y0) to (x1, y1) inclusive.
    """
    points: List[Coord] = []

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    x, y = x0, y0
    while True:
        points.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy

    return points


def within_radius(ox: int, oy: int, x: int, y: int, radius: int) -> bool:
    """Euclidean torch radius; a radius of 0 or less means unlimited."""
    if radius <= 0:
        return True
    dx, dy = x - ox, y - oy
    return dx * dx + dy * dy <= radius * radius


class VisibilitySet:
    """Immutable result of one visibility computation.

    Valid until the next recomputation; callers should not keep it across moves.
    """

    __slots__ = ("_coords", "origin")

    def __init__(self, coords: Iterable[Coord] = (), origin: Optional[Coord] = None) -> None:
        self._coords: FrozenSet[Coord] = frozenset(coords)
        self.origin = origin

    @classmethod
    def empty(cls) -> "VisibilitySet":
        return cls()

    def is_visible(self, x: int, y: int) -> bool:
        return (x, y) in self._coords

    def __contains__(self, coord: object) -> bool:
        return coord in self._coords

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VisibilitySet):
            return self._coords == other._coords
        if isinstance(other, (set, frozenset)):
            return self._coords == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._coords)

    def __repr__(self) -> str:
        return f"VisibilitySet(origin={self.origin}, size={len(self._coords)})"


class FieldOfView:
    """
    Visibility engine over a private transparency/walkability copy of a grid.

    The copy is taken once at construction; the dungeon never changes after
    generation, so ``refresh`` only needs calling if a different grid is swapped in.
    """

    def __init__(self, grid: TileGrid) -> None:
        self.width = grid.width
        self.height = grid.height
        self._transparent: List[List[bool]] = []
        self._walkable: List[List[bool]] = []
        self._visible = VisibilitySet.empty()
        self.refresh(grid)

    def refresh(self, grid: TileGrid) -> None:
        self.width = grid.width
        self.height = grid.height
        self._transparent = [[grid.is_transparent(x, y) for x in range(grid.width)] for y in range(grid.height)]
        self._walkable = [[grid.is_passable(x, y) for x in range(grid.width)] for y in range(grid.height)]
        self._visible = VisibilitySet.empty()
        logger.debug("FieldOfView populated from %r", grid)

    @property
    def visible(self) -> VisibilitySet:
        return self._visible

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_transparent(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._transparent[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._walkable[y][x]

    def is_in_fov(self, x: int, y: int) -> bool:
        return self._visible.is_visible(x, y)

    def compute(
        self,
        x: int,
        y: int,
        radius: int,
        light_walls: bool = True,
        algorithm: FovAlgorithm = FovAlgorithm.LINE_OF_SIGHT,
    ) -> VisibilitySet:
        """Recompute and store the visible set from viewer (x, y)."""
        if not self.in_bounds(x, y):
            logger.debug("Viewer (%d,%d) outside %dx%d map; nothing visible", x, y, self.width, self.height)
            self._visible = VisibilitySet.empty()
            return self._visible

        if FovAlgorithm(algorithm) is FovAlgorithm.RAYCAST:
            coords = self._raycast(x, y, radius, light_walls)
        else:
            coords = self._line_of_sight(x, y, radius, light_walls)
        coords.add((x, y))
        if light_walls:
            coords |= self._lit_walls(coords, x, y, radius)

        self._visible = VisibilitySet(coords, origin=(x, y))
        logger.debug("FOV from (%d,%d) radius %d -> %d visible tiles", x, y, radius, len(self._visible))
        return self._visible

    def _bounds(self, ox: int, oy: int, radius: int) -> Tuple[int, int, int, int]:
        if radius <= 0:
            return 0, 0, self.width - 1, self.height - 1
        return (
            max(0, ox - radius),
            max(0, oy - radius),
            min(self.width - 1, ox + radius),
            min(self.height - 1, oy + radius),
        )

    def _clear_line(self, ox: int, oy: int, tx: int, ty: int) -> bool:
        # origin and target excluded; only tiles in between can obstruct
        line = bresenham_line(ox, oy, tx, ty)
        for px, py in line[1:-1]:
            if not self.is_transparent(px, py):
                return False
        return True

    def _line_of_sight(self, ox: int, oy: int, radius: int, light_walls: bool) -> Set[Coord]:
        visible: Set[Coord] = set()
        min_x, min_y, max_x, max_y = self._bounds(ox, oy, radius)
        for ty in range(min_y, max_y + 1):
            for tx in range(min_x, max_x + 1):
                if not within_radius(ox, oy, tx, ty, radius):
                    continue
                if not light_walls and not self._transparent[ty][tx]:
                    continue
                if self._clear_line(ox, oy, tx, ty):
                    visible.add((tx, ty))
        return visible

    def _lit_walls(self, visible: Set[Coord], ox: int, oy: int, radius: int) -> Set[Coord]:
        """Opaque tiles in radius that touch a visible transparent tile.

        Lines that graze a wall run along it and stop at its first tile, so
        walls bordering a lit floor are lit by adjacency instead.
        """
        walls: Set[Coord] = set()
        for vx, vy in visible:
            if not self.is_transparent(vx, vy):
                continue
            for ny in range(vy - 1, vy + 2):
                for nx in range(vx - 1, vx + 2):
                    if (nx, ny) in visible or not self.in_bounds(nx, ny) or self._transparent[ny][nx]:
                        continue
                    if within_radius(ox, oy, nx, ny, radius):
                        walls.add((nx, ny))
        return walls

    def _raycast(self, ox: int, oy: int, radius: int, light_walls: bool) -> Set[Coord]:
        visible: Set[Coord] = set()
        min_x, min_y, max_x, max_y = self._bounds(ox, oy, radius)
        perimeter: List[Coord] = []
        for px in range(min_x, max_x + 1):
            perimeter.append((px, min_y))
            perimeter.append((px, max_y))
        for py in range(min_y + 1, max_y):
            perimeter.append((min_x, py))
            perimeter.append((max_x, py))

        for ex, ey in perimeter:
            for px, py in bresenham_line(ox, oy, ex, ey)[1:]:
                if not within_radius(ox, oy, px, py, radius):
                    break
                if self._transparent[py][px]:
                    visible.add((px, py))
                    continue
                if light_walls:
                    visible.add((px, py))
                break
        return visible


def compute_visibility(
    grid: TileGrid,
    viewer_x: int,
    viewer_y: int,
    radius: int,
    light_walls: bool,
    algorithm: FovAlgorithm = FovAlgorithm.LINE_OF_SIGHT,
) -> VisibilitySet:
    """One-shot visibility from (viewer_x, viewer_y); empty if the viewer is off-grid."""
    return FieldOfView(grid).compute(viewer_x, viewer_y, radius, light_walls, algorithm)


def mark_explored(grid: TileGrid, visible: Iterable[Coord]) -> int:
    """Set ``explored`` on every visible tile. Returns how many were newly explored."""
    newly = 0
    for x, y in visible:
        tile = grid.safe_get(x, y)
        if tile is None or tile.explored:
            continue
        tile.mark_explored()
        newly += 1
    if newly:
        logger.debug("Marked %d tiles explored", newly)
    return newly


__all__ = [
    "FieldOfView",
    "FovAlgorithm",
    "VisibilitySet",
    "bresenham_line",
    "compute_visibility",
    "mark_explored",
    "within_radius",
]
