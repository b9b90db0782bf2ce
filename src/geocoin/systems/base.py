"""Base class for pluggable systems.

Systems are the building blocks of the game, each handling one aspect of it
(the cache lifecycle, the player, keyboard input). They are discovered through
INSTALLED_SYSTEMS, instantiated by the SystemLoader in dependency order and
reach each other through the GameContext.

Example:
    Creating a custom system::

        from geocoin.systems.base import BaseSystem
        from geocoin.systems.registry import SystemRegistry

        @SystemRegistry.register
        class LeaderboardManager(BaseSystem):
            name = "leaderboard"
            dependencies = ["player"]

            def setup(self, context):
                self.best = 0
                context.event_bus.subscribe(PlayerStatusChangedEvent, self._on_status)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from geocoin.systems.game_context import GameContext


class BaseSystem(ABC):
    """Base class for all pluggable systems.

    Attributes:
        name: Unique identifier for the system. Must be defined as a class variable.
        dependencies: Names of systems this one needs. Systems are set up in
            dependency order, so dependencies are ready when setup() runs.
        role: Attribute name under which the GameContext exposes the system
            (e.g. "player_manager"), or None to only expose it via get_system().
    """

    # System identifier (must be unique across all systems)
    name: ClassVar[str]

    # Other systems this one depends on (by name)
    dependencies: ClassVar[list[str]] = []

    role: ClassVar[str | None] = None

    @abstractmethod
    def setup(self, context: GameContext) -> None:
        """Initialize the system.

        Called after all systems have been instantiated. Use it to read settings,
        keep a reference to the context and subscribe to events.

        Args:
            context: Game context providing access to other systems.
        """

    def update(self, delta_time: float) -> None:  # noqa: B027
        """Called every frame by the view.

        Args:
            delta_time: Time elapsed since the last frame, in seconds.
        """

    def cleanup(self) -> None:  # noqa: B027
        """Release resources and unsubscribe from events."""

    def reset(self) -> None:  # noqa: B027
        """Reset system state for a new game."""

    def on_key_press(self, symbol: int, modifiers: int) -> bool:  # noqa: ARG002
        """Handle key press events.

        Args:
            symbol: Arcade key constant for the pressed key.
            modifiers: Bitfield of modifier keys held.

        Returns:
            True if the event was handled and should stop propagating, False otherwise.
        """
        return False
