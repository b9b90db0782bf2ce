"""Grid cells and the cell identity registry.

The world is cut into square cells of TILE_DEGREES on a side, counted from a
fixed origin (Null Island by default). Cell (i, j) covers latitudes
[origin.lat + i * tile, origin.lat + (i + 1) * tile) and the matching longitude
band for j.

CellRegistry is a flyweight: asking for the same (i, j) twice returns the very
same Cell object, so the rest of the core can key dictionaries by Cell and
compare cells by identity. Cells are also frozen dataclasses, so structural
equality still holds for a Cell that outlived a registry prune.

Example usage:
    registry = CellRegistry(tile_degrees=1e-4)
    here = registry.cell_at(LatLng(36.9895, -122.0628))
    assert registry.get(here.i, here.j) is here
    south_west, north_east = registry.bounds(here)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)

# Quotients are rounded to this many decimals before flooring so that a player
# who walked N tiles of floating point degrees lands exactly in cell N.
_QUOTIENT_DECIMALS = 9


class LatLng(NamedTuple):
    """Continuous geodetic coordinate in degrees."""

    lat: float
    lng: float


NULL_ISLAND = LatLng(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Cell:
    """Integer grid coordinate of one world tile.

    Attributes:
        i: Row index, counted along latitude from the origin.
        j: Column index, counted along longitude from the origin.
    """

    i: int
    j: int

    @property
    def key(self) -> str:
        """String form "i,j" used as the generator key."""
        return f"{self.i},{self.j}"

    def distance_to(self, other: Cell) -> int:
        """Chebyshev distance in cells (king moves on a chessboard)."""
        return max(abs(self.i - other.i), abs(self.j - other.j))


def cell_coords(position: LatLng, tile_degrees: float, origin: LatLng = NULL_ISLAND) -> tuple[int, int]:
    """Convert a geodetic position to the (i, j) of the cell containing it.

    Args:
        position: Finite latitude/longitude in degrees.
        tile_degrees: Cell edge length in degrees.
        origin: Geodetic position of cell (0, 0).

    Returns:
        Tuple of integer cell coordinates.
    """
    i = math.floor(round((position.lat - origin.lat) / tile_degrees, _QUOTIENT_DECIMALS))
    j = math.floor(round((position.lng - origin.lng) / tile_degrees, _QUOTIENT_DECIMALS))
    return i, j


class CellRegistry:
    """Canonical store of Cell objects keyed by their coordinates.

    The registry grows by one entry per distinct cell it is asked about. Callers
    that roam a large world bound it with retain(), which the cache lifecycle
    manager runs after every window recomputation.

    Attributes:
        tile_degrees: Cell edge length in degrees.
        origin: Geodetic position of cell (0, 0).
    """

    def __init__(self, tile_degrees: float = 1e-4, origin: LatLng = NULL_ISLAND) -> None:
        """Initialize an empty registry.

        Args:
            tile_degrees: Cell edge length in degrees. Must be positive and finite.
            origin: Geodetic position of cell (0, 0).

        Raises:
            ValueError: If tile_degrees is not a positive finite number.
        """
        if not math.isfinite(tile_degrees) or tile_degrees <= 0:
            msg = f"tile_degrees must be a positive finite number, got {tile_degrees!r}"
            raise ValueError(msg)
        self.tile_degrees = tile_degrees
        self.origin = LatLng(*origin)
        self._cells: dict[tuple[int, int], Cell] = {}

    def get(self, i: int, j: int) -> Cell:
        """Return the canonical Cell for (i, j), creating it on first use."""
        key = (i, j)
        cell = self._cells.get(key)
        if cell is None:
            cell = Cell(i, j)
            self._cells[key] = cell
        return cell

    def cell_at(self, position: LatLng) -> Cell:
        """Return the canonical Cell containing a geodetic position."""
        return self.get(*cell_coords(position, self.tile_degrees, self.origin))

    def bounds(self, cell: Cell) -> tuple[LatLng, LatLng]:
        """Return the south-west and north-east corners of a cell."""
        south = self.origin.lat + cell.i * self.tile_degrees
        west = self.origin.lng + cell.j * self.tile_degrees
        return LatLng(south, west), LatLng(south + self.tile_degrees, west + self.tile_degrees)

    def retain(self, keep: Callable[[Cell], bool]) -> int:
        """Forget every cell for which keep(cell) is false.

        Args:
            keep: Predicate deciding which cells stay canonical.

        Returns:
            Number of cells removed.
        """
        stale = [key for key, cell in self._cells.items() if not keep(cell)]
        for key in stale:
            del self._cells[key]
        if stale:
            logger.debug("Pruned %d cells from registry (%d remain)", len(stale), len(self._cells))
        return len(stale)

    def clear(self) -> None:
        """Forget all cells."""
        self._cells.clear()

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, coords: object) -> bool:
        return coords in self._cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())
