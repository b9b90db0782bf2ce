"""Keyboard input system."""

from geocoin.systems.input.base import InputBaseManager
from geocoin.systems.input.manager import MOVEMENT_KEYS, InputManager

__all__ = [
    "MOVEMENT_KEYS",
    "InputBaseManager",
    "InputManager",
]
