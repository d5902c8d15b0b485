from delve.map import TileGrid
from delve.render import render_layout_lines, render_lines, tile_color
from delve.render.palette import (
    COLOR_DARK_GROUND,
    COLOR_DARK_WALL,
    COLOR_LIGHT_GROUND,
    COLOR_LIGHT_WALL,
)


def test_tile_colors():
    assert tile_color(visible=True, wall=True) == COLOR_LIGHT_WALL
    assert tile_color(visible=True, wall=False) == COLOR_LIGHT_GROUND
    assert tile_color(visible=False, wall=True) == COLOR_DARK_WALL
    assert tile_color(visible=False, wall=False) == COLOR_DARK_GROUND


def test_render_lines_distinguishes_lit_remembered_and_unknown():
    grid = TileGrid.from_lines([
        "####",
        "#..#",
        "####",
    ])
    for coord in [(0, 1), (1, 1), (2, 1)]:
        grid.get(*coord).mark_explored()
    visible = {(1, 1), (0, 1)}

    lines = render_lines(grid, visible, player=(1, 1))
    assert lines == [
        "    ",
        "#@, ",
        "    ",
    ]


def test_render_layout_marks_start():
    grid = TileGrid.from_lines(["#...#"])
    assert render_layout_lines(grid, (2, 0)) == ["#.@.#"]
    assert render_layout_lines(grid) == ["#...#"]
