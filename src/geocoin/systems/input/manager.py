"""Keyboard input for the player.

Maps Arcade key symbols onto player actions. This stands in for the movement,
collect, deposit and reset buttons of a map UI:

- Arrow keys: move one tile north/south/west/east
- C: collect from the nearest cache in reach
- D: deposit the inventory into the nearest cache in reach
- R: reset points and inventory and return to the start
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

import arcade

from geocoin.systems.input.base import InputBaseManager
from geocoin.systems.player.base import InvalidPositionError
from geocoin.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from geocoin.systems.game_context import GameContext

logger = logging.getLogger(__name__)

MOVEMENT_KEYS: dict[int, tuple[int, int]] = {
    arcade.key.UP: (1, 0),
    arcade.key.DOWN: (-1, 0),
    arcade.key.LEFT: (0, -1),
    arcade.key.RIGHT: (0, 1),
}


@SystemRegistry.register
class InputManager(InputBaseManager):
    """Translates key presses into PlayerManager calls."""

    name: ClassVar[str] = "input"
    dependencies: ClassVar[list[str]] = ["player"]

    def __init__(self) -> None:
        """Initialize the input manager."""
        self.context: GameContext | None = None

    def setup(self, context: GameContext) -> None:
        """Keep a reference to the context."""
        self.context = context
        logger.debug("InputManager setup complete")

    def get_movement_step(self, symbol: int) -> tuple[int, int] | None:
        """Get the (di, dj) cell step bound to a key, or None."""
        return MOVEMENT_KEYS.get(symbol)

    def on_key_press(self, symbol: int, modifiers: int) -> bool:  # noqa: ARG002
        """Dispatch a key press to the player manager.

        Moves that would leave the globe are refused with a warning and leave
        the player where they are.

        Returns:
            True if the key is bound to an action.
        """
        if not self.context:
            return False
        player = self.context.player_manager

        step = self.get_movement_step(symbol)
        if step is not None:
            try:
                player.move(*step)
            except InvalidPositionError as e:
                logger.warning("Cannot move there: %s", e)
            return True
        if symbol == arcade.key.C:
            player.collect_nearest()
            return True
        if symbol == arcade.key.D:
            player.deposit_nearest()
            return True
        if symbol == arcade.key.R:
            player.reset()
            return True
        return False
