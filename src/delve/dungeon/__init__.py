from .rect import Rect
from .generator import DungeonLayout, RoomsGenerator, Tunnel, generate

__all__ = ["DungeonLayout", "Rect", "RoomsGenerator", "Tunnel", "generate"]
