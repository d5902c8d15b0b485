import pytest

from delve.errors import DelveError, OutOfBoundsError
from delve.map import Position, Tile, TileGrid


def test_new_grid_is_all_walls():
    grid = TileGrid(6, 4)
    assert grid.width == 6 and grid.height == 4
    for x, y in grid.coords():
        tile = grid.get(x, y)
        assert tile.blocked and tile.block_sight
        assert not tile.explored
    assert grid.count_passable() == 0


def test_carve_makes_floor_that_is_passable_and_transparent():
    grid = TileGrid(5, 5)
    grid.carve(2, 3)
    assert grid.is_passable(2, 3)
    assert grid.is_transparent(2, 3)
    assert grid.get(2, 3).passable
    assert not grid.is_passable(3, 2)


def test_off_grid_reads_as_wall_without_raising():
    grid = TileGrid(3, 3)
    for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3), (100, 100)]:
        assert grid.is_passable(x, y) is False
        assert grid.is_transparent(x, y) is False
        assert grid.is_explored(x, y) is False
        assert grid.safe_get(x, y) is None


def test_strict_access_raises_out_of_bounds():
    grid = TileGrid(3, 3)
    with pytest.raises(OutOfBoundsError):
        grid.get(3, 0)
    with pytest.raises(IndexError):
        grid.set(-1, 0, Tile.empty())
    with pytest.raises(DelveError):
        grid.carve(0, 5)
    with pytest.raises(TypeError):
        grid.set(0, 0, "floor")  # type: ignore[arg-type]


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        TileGrid(0, 3)
    with pytest.raises(ValueError):
        TileGrid(3, -1)


def test_from_lines_and_to_lines():
    rows = [
        "#####",
        "#..x#",
        "#####",
    ]
    grid = TileGrid.from_lines(rows)
    assert grid.is_passable(1, 1) and grid.is_passable(2, 1)
    # unknown characters stay walls
    assert not grid.is_passable(3, 1)
    assert grid.to_lines() == ["#####", "#..##", "#####"]

    with pytest.raises(ValueError):
        TileGrid.from_lines(["..", "."])
    with pytest.raises(ValueError):
        TileGrid.from_lines([])


def test_signature_tracks_layout_but_not_exploration():
    grid = TileGrid(4, 4)
    before = grid.signature()
    grid.get(0, 0).mark_explored()
    assert grid.signature() == before

    grid.carve(1, 1)
    assert grid.signature() != before
    assert TileGrid.from_lines(grid.to_lines()).signature() == grid.signature()


def test_position_arithmetic():
    p = Position(2, 3) + Position(-1, 1)
    assert p == Position(1, 4)
    x, y = p
    assert (x, y) == p.as_tuple() == (1, 4)
