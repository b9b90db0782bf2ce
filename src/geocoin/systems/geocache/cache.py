"""Memento store for caches that left the neighborhood window.

When a live cache is evicted, its coins are copied into a CacheMemento keyed
by cell. When the cell comes back into the window, the memento is handed back
and removed, so a cell is either live or remembered, never both.

Example:
    store = MementoStore()
    store.snapshot(cell, cache.coins, cache.next_serial)
    ...
    memento = store.restore(cell)
    if memento is not None:
        cache = GeoCache.from_memento(cell, memento)
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import TYPE_CHECKING

from geocoin.systems.geocache.base import CacheMemento

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from geocoin.systems.geocache.base import Coin
    from geocoin.world.cells import Cell

logger = logging.getLogger(__name__)


class MementoStore:
    """At most one memento per cell, optionally capped in size.

    Attributes:
        limit: Maximum number of mementos kept, or None for no limit. When the
            limit is exceeded, the least recently stored memento expires.
    """

    def __init__(self, limit: int | None = None) -> None:
        """Initialize an empty store.

        Raises:
            ValueError: If limit is given and smaller than 1.
        """
        if limit is not None and limit < 1:
            msg = f"Memento store limit must be at least 1, got {limit}"
            raise ValueError(msg)
        self.limit = limit
        self._mementos: OrderedDict[Cell, CacheMemento] = OrderedDict()

    def snapshot(self, cell: Cell, coins: Iterable[Coin], next_serial: int = 0) -> CacheMemento:
        """Store a copy of a cache's coins, replacing any earlier memento for the cell.

        Args:
            cell: Cell the coins belong to.
            coins: Coins to capture. They are copied, so later changes to the
                source collection do not reach the memento.
            next_serial: Next unused serial of the cache's lineage.

        Returns:
            The stored memento.
        """
        memento = CacheMemento(coins=tuple(coins), next_serial=next_serial)
        self._mementos.pop(cell, None)
        self._mementos[cell] = memento
        logger.debug("Stored memento for (%d,%d) with %d coins", cell.i, cell.j, len(memento.coins))

        if self.limit is not None:
            while len(self._mementos) > self.limit:
                expired, _ = self._mementos.popitem(last=False)
                logger.debug("Memento for (%d,%d) expired", expired.i, expired.j)
        return memento

    def restore(self, cell: Cell) -> CacheMemento | None:
        """Remove and return the memento for a cell, or None if there is none."""
        return self._mementos.pop(cell, None)

    def peek(self, cell: Cell) -> CacheMemento | None:
        """Return the memento for a cell without removing it."""
        return self._mementos.get(cell)

    def has_cached_state(self, cell: Cell) -> bool:
        """Check if a cell has a memento."""
        return cell in self._mementos

    def clear(self) -> None:
        """Drop every memento."""
        self._mementos.clear()

    def __len__(self) -> int:
        return len(self._mementos)

    def __contains__(self, cell: object) -> bool:
        return cell in self._mementos

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._mementos)
