"""Delve: procedural dungeon generation with field of view and exploration."""

__version__ = "0.1.0"

from .dungeon.generator import generate
from .fov.fov import compute_visibility, mark_explored
from .movement import try_move

__all__ = ["__version__", "compute_visibility", "generate", "mark_explored", "try_move"]
