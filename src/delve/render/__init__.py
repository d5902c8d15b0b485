from .ascii import render_layout_lines, render_lines
from .palette import tile_color

__all__ = ["render_layout_lines", "render_lines", "tile_color"]
