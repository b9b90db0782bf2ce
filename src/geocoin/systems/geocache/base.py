"""Cache entities and the base class for the cache lifecycle manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from geocoin.systems.base import BaseSystem

if TYPE_CHECKING:
    from collections.abc import Iterable

    from geocoin.world.cells import Cell, LatLng


class CacheLifecycleError(RuntimeError):
    """A cache lifecycle invariant was violated.

    Raised when a cell would be spawned or restored while already live, or
    evicted while not live. This signals a bug, not a recoverable condition.
    """


class CacheStatus(Enum):
    """Lifecycle state of a single cell."""

    ABSENT = auto()  # No live cache and no memento
    LIVE = auto()  # Materialized in the neighborhood window
    EVICTED_WITH_MEMENTO = auto()  # Left the window, contents kept in a memento


@dataclass(frozen=True, slots=True)
class Coin:
    """A single, individually identified coin.

    Attributes:
        i: Row of the cell the coin was minted for.
        j: Column of the cell the coin was minted for.
        serial: Number unique within that cell's lineage.
    """

    i: int
    j: int
    serial: int

    def __str__(self) -> str:
        return f"{self.i}:{self.j}#{self.serial}"


@dataclass(frozen=True, slots=True)
class CacheMemento:
    """Immutable snapshot of a cache's contents taken at eviction.

    Attributes:
        coins: Coins held at the moment of the snapshot, in order.
        next_serial: Next unused serial of the cache's lineage.
    """

    coins: tuple[Coin, ...]
    next_serial: int


class GeoCache:
    """Mutable record of one cache's coins, identified by its cell.

    The cache owns a lineage serial counter. Every coin minted for the cache,
    at spawn or on deposit, takes the next serial, and the counter travels
    with the cache through its mementos, so a serial is never handed out twice
    for the same cell.

    Attributes:
        cell: Canonical cell this cache lives in.
        next_serial: Next unused serial of this cache's lineage.
    """

    def __init__(self, cell: Cell, coins: Iterable[Coin] = (), next_serial: int = 0) -> None:
        """Initialize a cache.

        Args:
            cell: Canonical cell this cache lives in.
            coins: Initial coins, in order.
            next_serial: Next unused serial. Raised automatically past any serial
                in coins minted for this cell.
        """
        self.cell = cell
        self.next_serial = next_serial
        self._coins: list[Coin] = []
        self.add_coins(coins)

    @classmethod
    def from_memento(cls, cell: Cell, memento: CacheMemento) -> GeoCache:
        """Rebuild a cache verbatim from a memento."""
        return cls(cell, memento.coins, memento.next_serial)

    @property
    def coins(self) -> tuple[Coin, ...]:
        """Coins currently held, in order."""
        return tuple(self._coins)

    @property
    def coin_count(self) -> int:
        """Number of coins currently held."""
        return len(self._coins)

    def add_coins(self, coins: Iterable[Coin]) -> None:
        """Append coins to the cache."""
        for coin in coins:
            self._coins.append(coin)
            if (coin.i, coin.j) == (self.cell.i, self.cell.j) and coin.serial >= self.next_serial:
                self.next_serial = coin.serial + 1

    def collect(self) -> int:
        """Remove every coin and return how many there were."""
        count = len(self._coins)
        self._coins = []
        return count

    def deposit(self, count: int) -> list[Coin]:
        """Mint count fresh coins into the cache.

        Args:
            count: Number of coins to mint. Zero is a no-op.

        Returns:
            The newly minted coins.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            msg = f"Cannot deposit a negative number of coins ({count})"
            raise ValueError(msg)
        minted = [Coin(self.cell.i, self.cell.j, self.next_serial + offset) for offset in range(count)]
        self.add_coins(minted)
        return minted

    def save_state(self) -> CacheMemento:
        """Capture the current contents as an immutable memento."""
        return CacheMemento(coins=tuple(self._coins), next_serial=self.next_serial)

    def __repr__(self) -> str:
        return f"GeoCache(cell=({self.cell.i},{self.cell.j}), coins={len(self._coins)})"


class GeoCacheBaseManager(BaseSystem, ABC):
    """Base class for GeoCacheManager."""

    role = "geocache_manager"

    @abstractmethod
    def on_player_position_changed(self, position: LatLng) -> None:
        """Recompute the neighborhood window around a new player position."""
        ...

    @abstractmethod
    def cache_at(self, cell: Cell | tuple[int, int]) -> GeoCache | None:
        """Get the live cache at a cell, or None if the cell has none."""
        ...

    @abstractmethod
    def status(self, cell: Cell | tuple[int, int]) -> CacheStatus:
        """Get the lifecycle state of a cell."""
        ...

    @abstractmethod
    def live_caches(self) -> list[GeoCache]:
        """Get all live caches in row-major order."""
        ...

    @abstractmethod
    def nearest_cache(self, center: Cell | tuple[int, int], max_distance: int) -> GeoCache | None:
        """Get the closest live cache within max_distance cells of center."""
        ...

    @abstractmethod
    def cell_for(self, position: LatLng) -> Cell:
        """Get the canonical cell containing a position."""
        ...
