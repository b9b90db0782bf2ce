"""Geocoin - a location-based coin collecting game built on Arcade.

The world is an unbounded grid of tiles laid over latitude/longitude. Some
tiles hold caches of coins. Which tiles, and how many coins, is decided by a
deterministic hash of the tile coordinates, so the same world appears every
time without storing it. Caches near the player are kept live; caches the
player walks away from are snapshotted and come back exactly as they were
left.

Quick start:
    from geocoin import run_game

    if __name__ == "__main__":
        run_game()

Headless usage:
    from geocoin import create_world

    context = create_world()
    context.player_manager.move(0, 1)
    for cache in context.geocache_manager.live_caches():
        print(cache.cell, cache.coin_count)

    # Or customize settings programmatically
    settings.configure(
        NEIGHBORHOOD_SIZE=4,
        WORLD_SEED="campus",
    )
"""

__version__ = "0.1.0"

from geocoin.conf import settings
from geocoin.events import EventBus
from geocoin.helpers import create_game, create_world, run_game
from geocoin.systems import (
    CacheStatus,
    Coin,
    GameContext,
    GeoCache,
    GeoCacheManager,
    InputManager,
    InvalidPositionError,
    PlayerManager,
)
from geocoin.views import GameView
from geocoin.world import CacheGenerator, Cell, CellRegistry, LatLng

__all__ = [
    "CacheGenerator",
    "CacheStatus",
    "Cell",
    "CellRegistry",
    "Coin",
    "EventBus",
    "GameContext",
    "GameView",
    "GeoCache",
    "GeoCacheManager",
    "InputManager",
    "InvalidPositionError",
    "LatLng",
    "PlayerManager",
    "__version__",
    "create_game",
    "create_world",
    "run_game",
    "settings",
]
