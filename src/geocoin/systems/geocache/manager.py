"""Cache lifecycle management around the player.

This module provides the GeoCacheManager, which keeps the set of live caches
in step with the player's position. Every cell moves through three states:

    ABSENT  --(enters window, generator says yes)-->  LIVE
    LIVE    --(farther than EVICTION_DISTANCE)-->     EVICTED_WITH_MEMENTO
    EVICTED_WITH_MEMENTO  --(enters window)-->        LIVE (restored verbatim)

The neighborhood window is the square of cells within NEIGHBORHOOD_SIZE
(Chebyshev distance) of the player's cell. Eviction uses EVICTION_DISTANCE,
which may be larger than the window so that caches on the edge do not flicker
while the player steps back and forth across it.

Recomputation runs on every PlayerMovedEvent:
1. For every window cell in row-major order: skip it if live, restore it if a
   memento exists, otherwise ask the generator whether a cache spawns there.
2. Snapshot and release every live cache farther than EVICTION_DISTANCE.
3. Optionally prune the cell registry down to live and remembered cells.

Generator draws are keyed by cell, so the resulting world does not depend on
the iteration order or on the path the player took to get here.

Example usage:
    manager = GeoCacheManager()
    manager.setup(context)
    manager.on_player_position_changed(LatLng(36.9895, -122.0628))
    for cache in manager.live_caches():
        print(cache.cell, cache.coin_count)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from geocoin.conf import settings
from geocoin.events import PlayerMovedEvent
from geocoin.systems.geocache.base import (
    CacheLifecycleError,
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
    WindowRecomputedEvent,
)
from geocoin.systems.registry import SystemRegistry
from geocoin.world.cells import Cell, CellRegistry, LatLng
from geocoin.world.luck import CacheGenerator

if TYPE_CHECKING:
    from geocoin.events import Event
    from geocoin.systems.geocache.base import CacheMemento
    from geocoin.systems.game_context import GameContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class GeoCacheManager(GeoCacheBaseManager):
    """Owns the live caches, their mementos and the cell registry.

    No other component mutates these collections. Collaborators get live
    GeoCache objects through cache_at() and may call collect()/deposit() on
    them while they are live.

    Attributes:
        generator: Deterministic source of spawn decisions and coin counts.
        cells: Flyweight registry of canonical cells.
        mementos: Snapshots of evicted caches.
        neighborhood_size: Chebyshev radius of the spawn window.
        eviction_distance: Chebyshev distance beyond which live caches are evicted.
        prune_cells: Whether to prune the registry after each recomputation.
    """

    name: ClassVar[str] = "geocache"
    dependencies: ClassVar[list[str]] = []

    def __init__(self, generator: CacheGenerator | None = None) -> None:
        """Initialize the manager.

        Args:
            generator: Generator to use instead of one built from settings.
        """
        self.generator = generator
        self.cells = CellRegistry()
        self.mementos = MementoStore()
        self.neighborhood_size = 8
        self.eviction_distance = 9
        self.prune_cells = True
        self.context: GameContext | None = None
        self._live: dict[Cell, GeoCache] = {}

    def setup(self, context: GameContext) -> None:
        """Read world settings and start listening for player movement.

        Raises:
            ImproperlyConfigured: If the world settings are inconsistent, e.g.
                EVICTION_DISTANCE is smaller than NEIGHBORHOOD_SIZE.
        """
        self.context = context

        settings.validate()
        self.neighborhood_size = int(settings.NEIGHBORHOOD_SIZE)
        self.eviction_distance = int(settings.EVICTION_DISTANCE)
        self.prune_cells = bool(settings.PRUNE_CELL_REGISTRY)
        self.cells = CellRegistry(settings.TILE_DEGREES, LatLng(*settings.WORLD_ORIGIN))
        self.mementos = MementoStore(settings.MEMENTO_STORE_LIMIT)
        self._live.clear()
        if self.generator is None:
            self.generator = CacheGenerator.from_settings()

        context.event_bus.subscribe(PlayerMovedEvent, self._on_player_moved)
        logger.debug(
            "GeoCacheManager setup complete (window=%d, eviction=%d)",
            self.neighborhood_size,
            self.eviction_distance,
        )

    def cleanup(self) -> None:
        """Stop listening for movement and drop all world state."""
        if self.context:
            self.context.event_bus.unregister_all(self)
        self._live.clear()
        self.mementos.clear()
        self.cells.clear()
        logger.debug("GeoCacheManager cleanup complete")

    def set_generator(self, generator: CacheGenerator) -> None:
        """Swap the generator used for cells that are not live or remembered."""
        self.generator = generator

    def _on_player_moved(self, event: Event) -> None:
        if isinstance(event, PlayerMovedEvent):
            self.on_player_position_changed(LatLng(event.lat, event.lng))

    def on_player_position_changed(self, position: LatLng) -> None:
        """Entry point for player movement, teleports and resets."""
        self.regenerate_around(position)

    def regenerate_around(self, position: LatLng) -> WindowRecomputedEvent:
        """Recompute the neighborhood window around a position.

        Args:
            position: Player position in degrees. Must already be validated.

        Returns:
            Summary of the pass, also published on the event bus.
        """
        if self.generator is None:
            self.generator = CacheGenerator.from_settings()
        generator = self.generator

        center = self.cells.cell_at(position)
        radius = self.neighborhood_size
        spawned = restored = evicted = 0

        for i in range(center.i - radius, center.i + radius + 1):
            for j in range(center.j - radius, center.j + radius + 1):
                cell = self.cells.get(i, j)
                if cell in self._live:
                    continue
                memento = self.mementos.restore(cell)
                if memento is not None:
                    self._restore(cell, memento)
                    restored += 1
                elif generator.spawns(cell):
                    self._spawn(cell, generator.initial_coin_count(cell))
                    spawned += 1

        for cell in [cell for cell in self._live if cell.distance_to(center) > self.eviction_distance]:
            self._evict(cell)
            evicted += 1

        if self.prune_cells:
            self.cells.retain(lambda cell: cell in self._live or cell in self.mementos)

        summary = WindowRecomputedEvent(center.i, center.j, spawned, restored, evicted, len(self._live))
        logger.info(
            "Window around (%d,%d): %d spawned, %d restored, %d evicted, %d live",
            center.i,
            center.j,
            spawned,
            restored,
            evicted,
            len(self._live),
        )
        self._publish(summary)
        return summary

    def _spawn(self, cell: Cell, count: int) -> None:
        if cell in self._live:
            msg = f"Cell ({cell.i},{cell.j}) spawned while already live"
            raise CacheLifecycleError(msg)
        cache = GeoCache(cell, (Coin(cell.i, cell.j, serial) for serial in range(count)))
        self._live[cell] = cache
        logger.debug("Spawned cache at (%d,%d) with %d coins", cell.i, cell.j, cache.coin_count)
        self._publish(CacheSpawnedEvent(cell.i, cell.j, cache.coin_count))

    def _restore(self, cell: Cell, memento: CacheMemento) -> None:
        if cell in self._live:
            msg = f"Cell ({cell.i},{cell.j}) restored while already live"
            raise CacheLifecycleError(msg)
        cache = GeoCache.from_memento(cell, memento)
        self._live[cell] = cache
        logger.debug("Restored cache at (%d,%d) with %d coins", cell.i, cell.j, cache.coin_count)
        self._publish(CacheRestoredEvent(cell.i, cell.j, cache.coin_count))

    def _evict(self, cell: Cell) -> None:
        cache = self._live.pop(cell, None)
        if cache is None:
            msg = f"Cell ({cell.i},{cell.j}) evicted while not live"
            raise CacheLifecycleError(msg)
        self.mementos.snapshot(cell, cache.coins, cache.next_serial)
        logger.debug("Evicted cache at (%d,%d) with %d coins", cell.i, cell.j, cache.coin_count)
        self._publish(CacheEvictedEvent(cell.i, cell.j, cache.coin_count))

    def _publish(self, event: Event) -> None:
        if self.context and self.context.event_bus:
            self.context.event_bus.publish(event)

    def cache_at(self, cell: Cell | tuple[int, int]) -> GeoCache | None:
        """Get the live cache at a cell, or None if the cell is not live."""
        return self._live.get(_as_cell(cell))

    def status(self, cell: Cell | tuple[int, int]) -> CacheStatus:
        """Get the lifecycle state of a cell."""
        cell = _as_cell(cell)
        if cell in self._live:
            return CacheStatus.LIVE
        if cell in self.mementos:
            return CacheStatus.EVICTED_WITH_MEMENTO
        return CacheStatus.ABSENT

    def live_caches(self) -> list[GeoCache]:
        """Get all live caches in row-major order."""
        return [self._live[cell] for cell in sorted(self._live, key=lambda cell: (cell.i, cell.j))]

    def nearest_cache(self, center: Cell | tuple[int, int], max_distance: int) -> GeoCache | None:
        """Get the closest live cache within max_distance cells of center.

        Ties are broken row-major (lowest i, then lowest j).
        """
        center = _as_cell(center)
        candidates = [cell for cell in self._live if cell.distance_to(center) <= max_distance]
        if not candidates:
            return None
        nearest = min(candidates, key=lambda cell: (cell.distance_to(center), cell.i, cell.j))
        return self._live[nearest]

    def cell_for(self, position: LatLng) -> Cell:
        """Get the canonical cell containing a position."""
        return self.cells.cell_at(position)


def _as_cell(cell: Cell | tuple[int, int]) -> Cell:
    """Accept either a Cell or an (i, j) pair for lookups."""
    if isinstance(cell, Cell):
        return cell
    return Cell(*cell)
