"""Event system for decoupled game event handling.

This module provides a publish/subscribe event system that lets the world core
talk to its collaborators without holding references to them. The player
system publishes a PlayerMovedEvent, the cache lifecycle manager recomputes
the neighborhood window in response, and a rendering layer can listen to the
resulting cache events to refresh what it shows.

Events only ever carry cell coordinates and counts, never widget or sprite
references, so the rendering layer can be swapped or left out entirely.

Example usage:
    event_bus = EventBus()

    def on_spawned(event: CacheSpawnedEvent):
        print(f"Cache at ({event.i},{event.j}) with {event.coin_count} coins")

    event_bus.subscribe(CacheSpawnedEvent, on_spawned)
    event_bus.publish(CacheSpawnedEvent(2, 3, 3))
    event_bus.clear()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Event:
    """Base event class."""


@dataclass
class GameResetEvent(Event):
    """Fired when the player resets the game.

    Published by the player system after points and inventory are cleared and
    before the player is moved back to the start position.
    """


@dataclass
class PlayerMovedEvent(Event):
    """Fired whenever the player's position changes.

    Published by the player system on every move, teleport and reset. The cache
    lifecycle manager subscribes to it and recomputes the neighborhood window.

    Attributes:
        lat: New latitude in degrees.
        lng: New longitude in degrees.
        i: Row of the cell containing the new position.
        j: Column of the cell containing the new position.
    """

    lat: float
    lng: float
    i: int
    j: int


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Publishers emit events without knowing who (if anyone) handles them, and
    subscribers listen for event types without knowing who publishes them.

    Handlers run synchronously, in registration order, on the caller's stack.
    A window recomputation triggered from a handler therefore finishes before
    publish() returns.

    Thread safety: This implementation is NOT thread-safe. All subscribe, publish,
    and unsubscribe calls should happen on the main game thread.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no registered listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type.

        The same handler can be subscribed multiple times and will be called once
        for each subscription.

        Args:
            event_type: The type of event to listen for (e.g., PlayerMovedEvent).
            handler: Callback that takes the event as its only argument.
        """
        if event_type not in self.listeners:
            self.listeners[event_type] = []
        self.listeners[event_type].append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Unsubscribe a handler from an event type.

        Removes ALL registrations of the handler. Unknown handlers are ignored.

        Args:
            event_type: The type of event to stop listening for.
            handler: The handler function to remove.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribed handlers.

        Events with no subscribers are silently ignored. Exceptions raised by a
        handler propagate to the publisher and stop later handlers from running.

        Args:
            event: The event instance to publish.
        """
        event_type = type(event)
        if event_type in self.listeners:
            for handler in list(self.listeners[event_type]):
                handler(event)

    def clear(self) -> None:
        """Clear all event listeners for all event types."""
        self.listeners.clear()

    def unregister_all(self, subscriber: object) -> None:
        """Unregister all handlers bound to a specific subscriber.

        Args:
            subscriber: The instance (e.g., a manager) whose bound-method handlers
                       should be removed.
        """
        for event_type in self.listeners:
            self.listeners[event_type] = [
                h for h in self.listeners[event_type] if not (hasattr(h, "__self__") and h.__self__ == subscriber)
            ]
