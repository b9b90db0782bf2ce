"""Player management system.

This module provides the PlayerManager class, which owns the player's position,
banked points and coin inventory. It is the boundary between the outside world
(buttons, keyboard, geolocation) and the cache lifecycle core:

- Positions are validated here. Non-finite or out-of-range coordinates raise
  InvalidPositionError and never reach the lifecycle manager.
- Every accepted position change is published as a PlayerMovedEvent, which the
  GeoCacheManager answers with a window recomputation.
- Collect and deposit move coins between a live cache and the inventory.

Example usage:
    player = context.player_manager
    player.move(1, 0)              # one tile north
    player.teleport(36.9895, -122.0628)
    player.collect_nearest()       # empty the closest cache into the inventory
    player.deposit_nearest()       # bank the inventory as points
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, ClassVar

from geocoin.conf import settings
from geocoin.events import GameResetEvent, PlayerMovedEvent
from geocoin.systems.geocache.events import CoinsCollectedEvent, CoinsDepositedEvent
from geocoin.systems.player.base import InvalidPositionError, PlayerBaseManager, PlayerState
from geocoin.systems.player.events import PlayerStatusChangedEvent
from geocoin.systems.registry import SystemRegistry
from geocoin.world.cells import NULL_ISLAND, Cell, LatLng, cell_coords

if TYPE_CHECKING:
    from geocoin.events import Event
    from geocoin.systems.game_context import GameContext
    from geocoin.systems.geocache.base import GeoCache

logger = logging.getLogger(__name__)

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


def validate_position(position: LatLng | tuple[float, float]) -> LatLng:
    """Check that a position is finite and on the globe.

    Args:
        position: Latitude/longitude pair in degrees.

    Returns:
        The position as a LatLng with float components.

    Raises:
        InvalidPositionError: If either component is not a finite number or lies
            outside [-90, 90] / [-180, 180].
    """
    try:
        lat, lng = float(position[0]), float(position[1])
    except (TypeError, ValueError, IndexError) as e:
        msg = f"Position must be a (lat, lng) pair of numbers, got {position!r}"
        raise InvalidPositionError(msg) from e

    if not (math.isfinite(lat) and math.isfinite(lng)):
        msg = f"Position must be finite, got ({lat}, {lng})"
        raise InvalidPositionError(msg)
    if abs(lat) > MAX_LATITUDE or abs(lng) > MAX_LONGITUDE:
        msg = f"Position ({lat}, {lng}) is outside the valid latitude/longitude range"
        raise InvalidPositionError(msg)
    return LatLng(lat, lng)


@SystemRegistry.register
class PlayerManager(PlayerBaseManager):
    """Manages the player's position, points and inventory.

    The counters live in a PlayerState owned by this manager rather than in
    module globals, so every GameContext gets an independent player.

    Attributes:
        state: Current player state.
        start: Position the player starts at and returns to on reset.
    """

    name: ClassVar[str] = "player"
    dependencies: ClassVar[list[str]] = ["geocache"]

    def __init__(self) -> None:
        """Initialize the player manager at Null Island."""
        self.state = PlayerState(position=NULL_ISLAND)
        self.start = NULL_ISLAND
        self.context: GameContext | None = None

    def setup(self, context: GameContext) -> None:
        """Read the start position from settings.

        The player is not announced until place_at_start() is called, so that
        all systems are set up before the first window recomputation.

        Raises:
            InvalidPositionError: If PLAYER_START is not a valid position.
        """
        self.context = context
        self.start = validate_position(settings.PLAYER_START)
        self.state = PlayerState(position=self.start)
        logger.debug("PlayerManager setup complete")

    @property
    def position(self) -> LatLng:
        """Current position in degrees."""
        return self.state.position

    @property
    def coords(self) -> tuple[int, int]:
        """Cell coordinates of the current position."""
        return cell_coords(self.state.position, settings.TILE_DEGREES, LatLng(*settings.WORLD_ORIGIN))

    @property
    def points(self) -> int:
        """Banked score."""
        return self.state.points

    @property
    def inventory(self) -> int:
        """Coins held."""
        return self.state.inventory

    def place_at_start(self) -> None:
        """Put the player on the start position and announce it."""
        self.set_position(self.start)

    def set_position(self, position: LatLng | tuple[float, float]) -> None:
        """Validate, store and publish a new position.

        Raises:
            InvalidPositionError: If the position is invalid. State is unchanged.
        """
        self.state.position = validate_position(position)
        i, j = self.coords
        logger.debug("Player at (%.6f, %.6f), cell (%d,%d)", self.state.position.lat, self.state.position.lng, i, j)
        self._publish(PlayerMovedEvent(self.state.position.lat, self.state.position.lng, i, j))

    def move(self, di: int, dj: int) -> None:
        """Move by whole cells: di along latitude (north), dj along longitude (east)."""
        tile = settings.TILE_DEGREES
        lat, lng = self.state.position
        self.set_position(LatLng(lat + di * tile, lng + dj * tile))

    def teleport(self, lat: float, lng: float) -> None:
        """Jump to a position, e.g. one reported by device geolocation."""
        logger.info("Teleporting player to (%.6f, %.6f)", lat, lng)
        self.set_position(LatLng(lat, lng))

    def collect(self, cell: Cell | tuple[int, int]) -> int:
        """Empty a live cache into the inventory.

        Args:
            cell: Cell of the cache.

        Returns:
            Number of coins collected. 0 if the cache was empty or not live.
        """
        cache = self._live_cache(cell)
        if cache is None:
            return 0

        count = cache.collect()
        if count:
            self.state.inventory += count
            logger.info("Collected %d coins from (%d,%d)", count, cache.cell.i, cache.cell.j)
            self._publish(CoinsCollectedEvent(cache.cell.i, cache.cell.j, count))
            self._publish_status()
        return count

    def deposit(self, cell: Cell | tuple[int, int]) -> int:
        """Deposit the whole inventory into a live cache and bank it as points.

        Args:
            cell: Cell of the cache.

        Returns:
            Number of coins deposited. 0 if the inventory was empty or the cache
            was not live.
        """
        count = self.state.inventory
        if count <= 0:
            logger.warning("Nothing to deposit")
            return 0

        cache = self._live_cache(cell)
        if cache is None:
            return 0

        cache.deposit(count)
        self.state.points += count
        self.state.inventory = 0
        logger.info("Deposited %d coins into (%d,%d)", count, cache.cell.i, cache.cell.j)
        self._publish(CoinsDepositedEvent(cache.cell.i, cache.cell.j, count))
        self._publish_status()
        return count

    def collect_nearest(self) -> int:
        """Collect from the nearest live cache within INTERACTION_DISTANCE."""
        cache = self._nearest_cache()
        return self.collect(cache.cell) if cache else 0

    def deposit_nearest(self) -> int:
        """Deposit into the nearest live cache within INTERACTION_DISTANCE."""
        cache = self._nearest_cache()
        return self.deposit(cache.cell) if cache else 0

    def reset(self) -> None:
        """Clear points and inventory and return to the start position.

        Caches and their mementos are part of the world, not the player, and
        survive a reset.
        """
        self.state.points = 0
        self.state.inventory = 0
        logger.info("Game reset")
        self._publish(GameResetEvent())
        self._publish_status()
        self.set_position(self.start)

    def _nearest_cache(self) -> GeoCache | None:
        if not self.context:
            return None
        cache = self.context.geocache_manager.nearest_cache(self.coords, settings.INTERACTION_DISTANCE)
        if cache is None:
            logger.info("No cache within %d cells", settings.INTERACTION_DISTANCE)
        return cache

    def _live_cache(self, cell: Cell | tuple[int, int]) -> GeoCache | None:
        if not self.context:
            return None
        cache = self.context.geocache_manager.cache_at(cell)
        if cache is None:
            i, j = (cell.i, cell.j) if isinstance(cell, Cell) else cell
            logger.warning("No live cache at (%d,%d)", i, j)
        return cache

    def _publish_status(self) -> None:
        self._publish(PlayerStatusChangedEvent(self.state.points, self.state.inventory))

    def _publish(self, event: Event) -> None:
        if self.context and self.context.event_bus:
            self.context.event_bus.publish(event)
