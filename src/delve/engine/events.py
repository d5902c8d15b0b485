from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by GameState to notify the renderer or other observers."""

    PLAYER_MOVED = auto()
    FOV_RECOMPUTED = auto()
    EXIT_REQUESTED = auto()
