"""Player system.

This package provides:
- PlayerManager: Position, points and inventory, plus collect/deposit actions
- PlayerState: The player's data
- InvalidPositionError: Raised for positions rejected at the boundary
- Events: Status changes for score and inventory displays
"""

from geocoin.systems.player.base import InvalidPositionError, PlayerBaseManager, PlayerState
from geocoin.systems.player.events import PlayerStatusChangedEvent
from geocoin.systems.player.manager import PlayerManager, validate_position

__all__ = [
    "InvalidPositionError",
    "PlayerBaseManager",
    "PlayerManager",
    "PlayerState",
    "PlayerStatusChangedEvent",
    "validate_position",
]
