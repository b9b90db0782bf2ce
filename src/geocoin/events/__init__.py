"""Publish/subscribe events shared by all systems."""

from geocoin.events.base import Event, EventBus, GameResetEvent, PlayerMovedEvent

__all__ = [
    "Event",
    "EventBus",
    "GameResetEvent",
    "PlayerMovedEvent",
]
