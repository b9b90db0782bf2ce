"""Events published as caches change state or contents.

All events carry plain cell coordinates and counts.
"""

from dataclasses import dataclass

from geocoin.events import Event


@dataclass
class CacheSpawnedEvent(Event):
    """Fired when a cache is generated from scratch in the window.

    Attributes:
        i: Cell row.
        j: Cell column.
        coin_count: Coins the cache starts with.
    """

    i: int
    j: int
    coin_count: int


@dataclass
class CacheRestoredEvent(Event):
    """Fired when a cache re-enters the window and is rebuilt from its memento.

    Attributes:
        i: Cell row.
        j: Cell column.
        coin_count: Coins restored.
    """

    i: int
    j: int
    coin_count: int


@dataclass
class CacheEvictedEvent(Event):
    """Fired when a live cache leaves the window and is snapshotted.

    Attributes:
        i: Cell row.
        j: Cell column.
        coin_count: Coins stored in the memento.
    """

    i: int
    j: int
    coin_count: int


@dataclass
class CoinsCollectedEvent(Event):
    """Fired when the player empties a cache into their inventory.

    Attributes:
        i: Cell row.
        j: Cell column.
        count: Coins moved into the inventory.
    """

    i: int
    j: int
    count: int


@dataclass
class CoinsDepositedEvent(Event):
    """Fired when the player deposits their inventory into a cache.

    Attributes:
        i: Cell row.
        j: Cell column.
        count: Coins minted into the cache (and points banked).
    """

    i: int
    j: int
    count: int


@dataclass
class WindowRecomputedEvent(Event):
    """Fired after every neighborhood window recomputation.

    Attributes:
        i: Row of the player's cell.
        j: Column of the player's cell.
        spawned: Caches generated from scratch in this pass.
        restored: Caches rebuilt from mementos in this pass.
        evicted: Caches snapshotted and released in this pass.
        live: Live caches after the pass.
    """

    i: int
    j: int
    spawned: int
    restored: int
    evicted: int
    live: int
