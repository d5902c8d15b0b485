from __future__ import annotations

from enum import Enum, auto


class InputAction(Enum):
    """Logical input actions consumed by the game core.

    Physical keys never reach the core; front-ends translate them through
    :class:`delve.input.mapping.InputMapper` first.
    """

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    EXIT = auto()


__all__ = ["InputAction"]
