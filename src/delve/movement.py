from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Protocol

from .input.actions import InputAction
from .map.position import Position

logger = logging.getLogger(__name__)

_DELTAS = {
    InputAction.MOVE_UP: Position(0, -1),
    InputAction.MOVE_DOWN: Position(0, 1),
    InputAction.MOVE_LEFT: Position(-1, 0),
    InputAction.MOVE_RIGHT: Position(1, 0),
}


class CollisionMap(Protocol):
    """Anything that can answer passability; off-grid must answer False."""

    def is_passable(self, x: int, y: int) -> bool: ...


class MoveResult(NamedTuple):
    position: Position
    moved: bool


def delta_for(action: Optional[InputAction]) -> Position:
    """Unit delta for a directional action; (0, 0) for anything else."""
    if action is None:
        return Position()
    return _DELTAS.get(action, Position())


def try_move(grid: CollisionMap, current: Position, delta: Position) -> MoveResult:
    """Attempt to move from ``current`` by ``delta``.

    Each axis is gated on its own: the vertical step survives only if the tile
    above/below ``current`` is passable, the horizontal step only if the tile
    left/right of ``current`` is. The combined target is then checked again
    and must differ from ``current``. A diagonal request is therefore judged
    by its two orthogonal neighbours, which lets it cut corners.

    Never raises for off-grid coordinates; they are simply not passable.
    A delta component outside {-1, 0, 1} is a caller bug and raises
    ValueError rather than being clamped.
    """
    dx, dy = delta.x, delta.y
    if dx not in (-1, 0, 1) or dy not in (-1, 0, 1):
        raise ValueError(f"delta components must be in {{-1, 0, 1}}, got ({dx}, {dy})")

    step_y = dy if dy and grid.is_passable(current.x, current.y + dy) else 0
    step_x = dx if dx and grid.is_passable(current.x + dx, current.y) else 0
    candidate = current + Position(step_x, step_y)

    if candidate == current or not grid.is_passable(candidate.x, candidate.y):
        logger.debug("Blocked move by (%d, %d) from %s", dx, dy, current)
        return MoveResult(current, False)

    logger.debug("Moved from %s to %s", current, candidate)
    return MoveResult(candidate, True)


__all__ = ["CollisionMap", "MoveResult", "delta_for", "try_move"]
