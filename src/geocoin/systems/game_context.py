"""Game context passed to every system.

The GameContext holds the event bus, the optional arcade window and a
registry of all systems. Systems reach each other by name via get_system(),
or through the typed role attributes (context.geocache_manager,
context.player_manager, context.input_manager) that register_system() sets.

Example usage:
    context = GameContext(event_bus=EventBus())
    context.register_system("geocache", geocache_manager)
    context.geocache_manager.cache_at(cell)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import arcade

    from geocoin.events import EventBus
    from geocoin.systems.base import BaseSystem
    from geocoin.systems.geocache.base import GeoCacheBaseManager
    from geocoin.systems.input.base import InputBaseManager
    from geocoin.systems.player.base import PlayerBaseManager


class GameContext:
    """Central context object providing access to all game systems.

    Attributes:
        event_bus: Publish/subscribe event system for decoupled communication.
        window: Reference to the arcade Window, or None when running headless.
    """

    geocache_manager: GeoCacheBaseManager
    player_manager: PlayerBaseManager
    input_manager: InputBaseManager

    def __init__(self, event_bus: EventBus, window: arcade.Window | None = None) -> None:
        """Initialize game context.

        Args:
            event_bus: Central event system shared by all systems.
            window: Arcade window, if one exists.
        """
        self.event_bus = event_bus
        self.window = window

        # Registry for all pluggable systems (accessed via get_system)
        self._systems: dict[str, BaseSystem] = {}

    def register_system(self, name: str, system: BaseSystem) -> None:
        """Register a system and expose it under its role attribute, if any.

        Args:
            name: Unique identifier for the system (e.g., "geocache", "player").
            system: The system instance to register.
        """
        self._systems[name] = system

        if system.role:
            setattr(self, system.role, system)

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a registered system by name, or None if not registered."""
        return self._systems.get(name)

    def get_systems(self) -> dict[str, BaseSystem]:
        """Get all registered systems."""
        return self._systems
