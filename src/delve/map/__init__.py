from .tiles import Tile
from .grid import Coord, TileGrid
from .position import Position

__all__ = ["Coord", "Position", "Tile", "TileGrid"]
