from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from ..input.actions import InputAction
from .game_state import GameState

logger = logging.getLogger(__name__)

InputSource = Callable[[], Optional[InputAction]]


@dataclass
class LoopConfig:
    """Configuration for the turn loop.

    Attributes:
        tick_rate: Target ticks per second. If 0 or None, ticks as fast as possible.
        max_steps: If provided and > 0, the loop stops after this many ticks.
    """

    tick_rate: float = 30.0
    max_steps: Optional[int] = None


class ScriptedInput:
    """Input source replaying a fixed list of actions, then asking to exit."""

    def __init__(self, actions: Iterable[InputAction]) -> None:
        self._it: Iterator[InputAction] = iter(list(actions))

    def __call__(self) -> Optional[InputAction]:
        return next(self._it, InputAction.EXIT)


class GameEngine:
    """Headless turn loop: poll one action, tick the game state, repeat.

    Rendering is left to whoever drives ``update`` (the Arcade window) or to
    the caller after ``run`` returns.
    """

    def __init__(self, state: GameState, input_source: InputSource, config: Optional[LoopConfig] = None) -> None:
        self.state = state
        self.input_source = input_source
        self.config = config or LoopConfig()
        self._running: bool = False
        self._step: int = 0
        self._last_time: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def step(self) -> int:
        return self._step

    def start(self) -> None:
        """Start the loop state; calling it again while running is a no-op."""
        if self._running:
            logger.debug("GameEngine.start() called while already running")
            return
        self._running = True
        self._step = 0
        self._last_time = time.perf_counter()
        logger.info("GameEngine started (tick_rate=%s, max_steps=%s)", self.config.tick_rate, self.config.max_steps)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        logger.info("GameEngine stopped at step=%s", self._step)

    def update(self, dt: float) -> None:
        """Perform a single tick."""
        if not self._running:
            logger.debug("update() called while not running; ignored")
            return
        action = self.input_source()
        result = self.state.tick(action)
        self._step += 1
        logger.debug("Tick #%d (dt=%.4f) action=%s moved=%s", self._step, dt, action, result.moved)

        if result.exit_requested:
            self.stop()
        elif self.config.max_steps is not None and self._step >= self.config.max_steps:
            self.stop()

    def run(self) -> None:
        """Run a blocking loop until stopped, throttled to tick_rate if configured."""
        self.start()
        target_dt = 0.0
        if self.config.tick_rate and self.config.tick_rate > 0:
            target_dt = 1.0 / float(self.config.tick_rate)

        while self._running:
            now = time.perf_counter()
            dt = 0.0 if self._last_time is None else now - self._last_time
            self._last_time = now

            self.update(dt)

            if target_dt > 0:
                remaining = target_dt - (time.perf_counter() - now)
                if remaining > 0:
                    time.sleep(remaining)

        logger.info("Loop complete (steps=%d)", self._step)


__all__ = ["GameEngine", "InputSource", "LoopConfig", "ScriptedInput"]
