"""Cache lifecycle system.

This package provides:
- GeoCache and Coin: A cache's contents and its individually identified coins
- MementoStore: Snapshots of caches that left the player's neighborhood
- GeoCacheManager: Spawns, restores and evicts caches as the player moves
- Events: Notifications for every lifecycle transition and coin movement
"""

from geocoin.systems.geocache.base import (
    CacheLifecycleError,
    CacheMemento,
    CacheStatus,
    Coin,
    GeoCache,
    GeoCacheBaseManager,
)
from geocoin.systems.geocache.cache import MementoStore
from geocoin.systems.geocache.events import (
    CacheEvictedEvent,
    CacheRestoredEvent,
    CacheSpawnedEvent,
    CoinsCollectedEvent,
    CoinsDepositedEvent,
    WindowRecomputedEvent,
)
from geocoin.systems.geocache.manager import GeoCacheManager

__all__ = [
    "CacheEvictedEvent",
    "CacheLifecycleError",
    "CacheMemento",
    "CacheRestoredEvent",
    "CacheSpawnedEvent",
    "CacheStatus",
    "Coin",
    "CoinsCollectedEvent",
    "CoinsDepositedEvent",
    "GeoCache",
    "GeoCacheBaseManager",
    "GeoCacheManager",
    "MementoStore",
    "WindowRecomputedEvent",
]
