from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]

COLOR_DARK_WALL: Color = (0, 0, 100)
COLOR_LIGHT_WALL: Color = (130, 110, 50)
COLOR_DARK_GROUND: Color = (50, 50, 150)
COLOR_LIGHT_GROUND: Color = (200, 180, 50)
COLOR_PLAYER: Color = (255, 255, 255)
COLOR_BACKGROUND: Color = (0, 0, 0)


def tile_color(visible: bool, wall: bool) -> Color:
    if visible:
        return COLOR_LIGHT_WALL if wall else COLOR_LIGHT_GROUND
    return COLOR_DARK_WALL if wall else COLOR_DARK_GROUND


__all__ = [
    "COLOR_BACKGROUND",
    "COLOR_DARK_GROUND",
    "COLOR_DARK_WALL",
    "COLOR_LIGHT_GROUND",
    "COLOR_LIGHT_WALL",
    "COLOR_PLAYER",
    "Color",
    "tile_color",
]
