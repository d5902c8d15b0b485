from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .actions import InputAction

logger = logging.getLogger(__name__)


class InputMapper:
    """Rebindable mapping from physical keys to logical actions.

    Keys are strings normalized to uppercase, or backend key codes (ints)
    which are stringified and usually resolved through an alias. This keeps
    the mapper independent of the windowing library: the Arcade front-end
    simply registers aliases for its key constants.

    Example usage:
        mapper = InputMapper.default()
        mapper.translate_key("w")   # -> InputAction.MOVE_UP
    """

    def __init__(self, bindings: Optional[Dict[str, InputAction]] = None) -> None:
        self._bindings: Dict[str, InputAction] = {}
        self._aliases: Dict[str, str] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)

    @staticmethod
    def _normalize(key: str | int | None) -> Optional[str]:
        if key is None:
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    def bind(self, key: str | int, action: InputAction) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def bind_many(self, keys: Iterable[str | int], action: InputAction) -> None:
        for k in keys:
            self.bind(k, action)

    def unbind(self, key: str | int) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str | int, canonical_name: str) -> None:
        """Register e.g. ``set_alias(65362, "UP")`` for a backend key code."""
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    def translate_key(self, key: str | int | None) -> Optional[InputAction]:
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        return self._bindings.get(canonical)

    def parse_script(self, script: str) -> List[InputAction]:
        """Translate a move script, one key per character ("WWDS", "kkl").

        Whitespace and commas are ignored; unbound characters raise ValueError.
        """
        actions: List[InputAction] = []
        for ch in script:
            if ch.isspace() or ch == ",":
                continue
            action = self.translate_key(ch)
            if action is None:
                raise ValueError(f"Unbound key in move script: {ch!r}")
            actions.append(action)
        return actions

    @classmethod
    def default(cls) -> "InputMapper":
        """Arrows, WASD and vi keys (HJKL) for movement; Escape/Q to exit."""
        mapper = cls()

        mapper.bind_many(["UP", "W", "K"], InputAction.MOVE_UP)
        mapper.bind_many(["DOWN", "S", "J"], InputAction.MOVE_DOWN)
        mapper.bind_many(["LEFT", "A", "H"], InputAction.MOVE_LEFT)
        mapper.bind_many(["RIGHT", "D", "L"], InputAction.MOVE_RIGHT)
        mapper.bind_many(["ESCAPE", "ESC", "Q"], InputAction.EXIT)

        return mapper


__all__ = ["InputMapper"]
