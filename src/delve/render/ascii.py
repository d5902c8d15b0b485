"""Plain-text views of the dungeon for the headless runner and debugging."""
from __future__ import annotations

from typing import Container, List, Optional, Tuple

from ..map.grid import Coord, TileGrid

VISIBLE_WALL = "#"
VISIBLE_FLOOR = "."
REMEMBERED_WALL = "+"
REMEMBERED_FLOOR = ","
UNEXPLORED = " "


def render_lines(
    grid: TileGrid,
    visible: Container[Coord],
    player: Optional[Tuple[int, int]] = None,
    glyph: str = "@",
) -> List[str]:
    """Explored-only view: lit tiles, remembered tiles, blanks for the unknown."""
    rows: List[str] = []
    for y in range(grid.height):
        chars = []
        for x in range(grid.width):
            if player is not None and (x, y) == tuple(player):
                chars.append(glyph)
                continue
            tile = grid.get(x, y)
            if (x, y) in visible:
                chars.append(VISIBLE_WALL if tile.block_sight else VISIBLE_FLOOR)
            elif tile.explored:
                chars.append(REMEMBERED_WALL if tile.block_sight else REMEMBERED_FLOOR)
            else:
                chars.append(UNEXPLORED)
        rows.append("".join(chars))
    return rows


def render_layout_lines(grid: TileGrid, start: Optional[Tuple[int, int]] = None) -> List[str]:
    """Full layout regardless of exploration, with the start marked '@'."""
    rows = grid.to_lines()
    if start is not None and grid.in_bounds(*start):
        sx, sy = start
        rows[sy] = rows[sy][:sx] + "@" + rows[sy][sx + 1:]
    return rows


__all__ = ["render_layout_lines", "render_lines"]
