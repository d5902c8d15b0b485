from __future__ import annotations

import logging

import arcade
from arcade.shape_list import ShapeElementList, create_rectangle_filled

from ..engine.events import GameEvent
from ..engine.game_state import GameState
from ..input.mapping import InputMapper
from ..render.palette import COLOR_BACKGROUND, COLOR_PLAYER, tile_color

logger = logging.getLogger(__name__)

# arcade.key constants resolved through InputMapper aliases
_KEY_NAMES = ("UP", "DOWN", "LEFT", "RIGHT", "ESCAPE", "W", "A", "S", "D", "H", "J", "K", "L", "Q")


class DungeonWindow(arcade.Window):
    """Arcade window drawing explored tiles and the player.

    Tile shapes are rebuilt only when the game state reports a visibility
    recomputation; every other frame reuses the cached shape list.
    """

    def __init__(self, state: GameState, mapper: InputMapper | None = None) -> None:
        self.state = state
        self.tile_px = state.settings.display.tile_px
        super().__init__(
            state.grid.width * self.tile_px,
            state.grid.height * self.tile_px,
            title=state.settings.display.title,
        )
        self.background_color = COLOR_BACKGROUND
        self.mapper = mapper or InputMapper.default()
        for name in _KEY_NAMES:
            self.mapper.set_alias(getattr(arcade.key, name), name)

        self._tiles = ShapeElementList()
        self._dirty = True
        state.add_listener(self._on_event)
        logger.info("Arcade window initialized (%dx%d)", self.width, self.height)

    def _on_event(self, event: GameEvent, state: GameState) -> None:
        if event is GameEvent.FOV_RECOMPUTED:
            self._dirty = True

    def _screen_center(self, x: int, y: int) -> tuple[float, float]:
        # grid y grows downwards, arcade y grows upwards
        cx = x * self.tile_px + self.tile_px / 2
        cy = (self.state.grid.height - 1 - y) * self.tile_px + self.tile_px / 2
        return cx, cy

    def _rebuild_tiles(self) -> None:
        shapes = ShapeElementList()
        grid = self.state.grid
        for x, y in grid.coords():
            tile = grid.get(x, y)
            if not tile.explored:
                continue
            cx, cy = self._screen_center(x, y)
            color = tile_color(self.state.is_visible(x, y), tile.block_sight)
            shapes.append(create_rectangle_filled(cx, cy, self.tile_px, self.tile_px, color))
        self._tiles = shapes
        self._dirty = False

    def on_draw(self) -> None:
        self.clear()
        if self._dirty:
            self._rebuild_tiles()
        self._tiles.draw()
        px, py = self.state.player_pos
        cx, cy = self._screen_center(px, py)
        arcade.draw_text(
            self.state.player_glyph,
            cx,
            cy,
            COLOR_PLAYER,
            font_size=self.tile_px * 0.75,
            anchor_x="center",
            anchor_y="center",
        )

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        action = self.mapper.translate_key(symbol)
        if action is None:
            return
        result = self.state.tick(action)
        if result.exit_requested:
            self.close()


def run_window(state: GameState) -> int:  # pragma: no cover - needs a display
    window = DungeonWindow(state)
    logger.info("Launching Arcade window")
    arcade.run()
    logger.info("Arcade loop finished at %s", window.state.player_pos)
    return 0


__all__ = ["DungeonWindow", "run_window"]
