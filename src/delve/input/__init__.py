"""
Input abstraction layer.

Exposes:
- InputAction: logical actions consumed by the game core.
- InputMapper: rebindable mapping from physical keys to actions.
"""
from .actions import InputAction
from .mapping import InputMapper

__all__ = ["InputAction", "InputMapper"]
