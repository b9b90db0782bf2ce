"""Player state and the base class for PlayerManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geocoin.systems.base import BaseSystem

if TYPE_CHECKING:
    from geocoin.world.cells import Cell, LatLng


class InvalidPositionError(ValueError):
    """A position is not finite or lies outside the valid lat/lng range."""


@dataclass
class PlayerState:
    """Everything the game knows about the player.

    Attributes:
        position: Current geodetic position in degrees.
        points: Banked score. Every deposited coin is worth one point.
        inventory: Collected coins awaiting deposit. Kept as a plain count.
    """

    position: LatLng
    points: int = 0
    inventory: int = 0


class PlayerBaseManager(BaseSystem, ABC):
    """Base class for PlayerManager."""

    role = "player_manager"

    @abstractmethod
    def set_position(self, position: LatLng) -> None:
        """Validate and apply a new player position."""
        ...

    @abstractmethod
    def move(self, di: int, dj: int) -> None:
        """Move the player by whole cells."""
        ...

    @abstractmethod
    def collect(self, cell: Cell | tuple[int, int]) -> int:
        """Empty a live cache into the inventory."""
        ...

    @abstractmethod
    def deposit(self, cell: Cell | tuple[int, int]) -> int:
        """Deposit the whole inventory into a live cache."""
        ...

    @abstractmethod
    def collect_nearest(self) -> int:
        """Collect from the nearest cache in reach."""
        ...

    @abstractmethod
    def deposit_nearest(self) -> int:
        """Deposit into the nearest cache in reach."""
        ...
