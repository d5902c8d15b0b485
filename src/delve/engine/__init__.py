from .events import GameEvent
from .game_state import GameState, TickResult
from .loop import GameEngine, LoopConfig, ScriptedInput

__all__ = ["GameEngine", "GameEvent", "GameState", "LoopConfig", "ScriptedInput", "TickResult"]
