from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from ..config import Settings
from ..engine.game_state import GameState
from ..engine.loop import GameEngine, LoopConfig, ScriptedInput
from ..input.mapping import InputMapper
from ..render.ascii import render_lines

logger = logging.getLogger(__name__)


def summarize(state: GameState) -> Dict[str, Any]:
    """JSON-serializable snapshot of a game state, stable across runs for a seed."""
    grid = state.grid
    return {
        "seed": state.settings.seed,
        "width": grid.width,
        "height": grid.height,
        "start": list(state.layout.start),
        "rooms": [[r.x1, r.y1, r.x2, r.y2] for r in state.layout.rooms],
        "rejected": state.layout.rejected,
        "degenerate": state.layout.degenerate,
        "signature": grid.signature(),
        "position": list(state.player_pos),
        "visible": len(state.visible),
        "explored": grid.count_explored(),
        "fov_recomputations": state.fov_recomputations,
    }


def run_headless(
    settings: Settings,
    moves: str = "",
    max_steps: Optional[int] = None,
    tick_rate: float = 0.0,
    as_json: bool = False,
) -> int:
    """Generate a dungeon, replay a move script, then print the result.

    Returns the process exit code.
    """
    state = GameState(settings)
    actions = InputMapper.default().parse_script(moves)
    engine = GameEngine(state, ScriptedInput(actions), LoopConfig(tick_rate=tick_rate, max_steps=max_steps))
    engine.run()

    if as_json:
        print(json.dumps(summarize(state), indent=2, sort_keys=True))
    else:
        print(f"{settings.display.title} (headless) seed={settings.seed} steps={engine.step}")
        for line in render_lines(state.grid, state.visible, state.player_pos, state.player_glyph):
            print(line.rstrip())
    return 0


def run_gui(settings: Settings) -> int:  # pragma: no cover - needs a display
    from .arcade_app import run_window

    return run_window(GameState(settings))


__all__ = ["run_gui", "run_headless", "summarize"]
