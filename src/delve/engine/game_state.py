from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple, Optional, Tuple

from ..config import Settings
from ..dungeon.generator import DungeonLayout, RoomsGenerator
from ..errors import DegenerateGenerationError
from ..fov.fov import FieldOfView, FovAlgorithm, VisibilitySet, mark_explored
from ..input.actions import InputAction
from ..map.grid import TileGrid
from ..map.position import Position
from ..movement import delta_for, try_move
from ..rng import RandomLike, RandomSource
from .events import GameEvent

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, "GameState"], None]


class TickResult(NamedTuple):
    moved: bool
    exit_requested: bool
    position: Position


class GameState:
    """Owns the dungeon, the player position and the visibility engine.

    One ``tick`` consumes at most one input action. Visibility is recomputed
    only after a move that actually changed the position, never per frame.
    """

    player_glyph = "@"

    def __init__(self, settings: Optional[Settings] = None, rng: Optional[RandomLike] = None) -> None:
        self.settings = settings or Settings()
        self._listeners: List[Listener] = []
        m = self.settings.map
        if rng is None:
            rng = RandomSource(self.settings.seed).derive("map_layout", m.width, m.height)

        generator = RoomsGenerator(m.max_rooms, m.room_min_size, m.room_max_size)
        self.layout: DungeonLayout = generator.build(m.width, m.height, rng)
        if self.layout.degenerate:
            if m.strict:
                raise DegenerateGenerationError(
                    f"No room placed in {m.max_rooms} attempts on a {m.width}x{m.height} map"
                )
            logger.warning("Degenerate dungeon: player starts on %s, which may be a wall", self.layout.start)

        self._player = self.layout.start
        self._fov = FieldOfView(self.layout.grid)
        self.fov_recomputations = 0
        self.exit_requested = False
        self._recompute_fov()
        logger.info("Initialized GameState %dx%d, player at %s", m.width, m.height, self._player)

    @property
    def grid(self) -> TileGrid:
        return self.layout.grid

    @property
    def visible(self) -> VisibilitySet:
        return self._fov.visible

    @property
    def player(self) -> Position:
        return self._player

    @property
    def player_pos(self) -> Tuple[int, int]:
        return self._player.as_tuple()

    def is_visible(self, x: int, y: int) -> bool:
        return self._fov.is_in_fov(x, y)

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to game events (movement, visibility, exit)."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception:
                logger.exception("Listener errored on %s", event)

    def _recompute_fov(self) -> None:
        fov = self.settings.fov
        visible = self._fov.compute(
            self._player.x,
            self._player.y,
            fov.radius,
            fov.light_walls,
            FovAlgorithm(fov.algorithm),
        )
        mark_explored(self.grid, visible)
        self.fov_recomputations += 1
        self._emit(GameEvent.FOV_RECOMPUTED)

    def tick(self, action: Optional[InputAction] = None) -> TickResult:
        """Process one turn: at most one action, then visibility if the player moved."""
        if action is InputAction.EXIT:
            self.exit_requested = True
            logger.info("Exit requested at %s", self._player)
            self._emit(GameEvent.EXIT_REQUESTED)
            return TickResult(False, True, self._player)

        delta = delta_for(action)
        if delta == Position():
            return TickResult(False, self.exit_requested, self._player)

        result = try_move(self.grid, self._player, delta)
        if result.moved:
            self._player = result.position
            self._emit(GameEvent.PLAYER_MOVED)
            self._recompute_fov()
        return TickResult(result.moved, self.exit_requested, self._player)


__all__ = ["GameState", "TickResult"]
