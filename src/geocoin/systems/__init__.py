"""Game systems for managing different aspects of gameplay."""

from geocoin.systems.base import BaseSystem
from geocoin.systems.game_context import GameContext
from geocoin.systems.geocache import (
    CacheLifecycleError,
    CacheStatus,
    Coin,
    GeoCache,
    GeoCacheManager,
    MementoStore,
)
from geocoin.systems.input import InputManager
from geocoin.systems.loader import CircularDependencyError, MissingDependencyError, SystemLoader
from geocoin.systems.player import InvalidPositionError, PlayerManager, PlayerState
from geocoin.systems.registry import SystemRegistry

__all__ = [
    "BaseSystem",
    "CacheLifecycleError",
    "CacheStatus",
    "CircularDependencyError",
    "Coin",
    "GameContext",
    "GeoCache",
    "GeoCacheManager",
    "InputManager",
    "InvalidPositionError",
    "MementoStore",
    "MissingDependencyError",
    "PlayerManager",
    "PlayerState",
    "SystemLoader",
    "SystemRegistry",
]
