"""Grid geometry and deterministic world generation."""

from geocoin.world.cells import NULL_ISLAND, Cell, CellRegistry, LatLng, cell_coords
from geocoin.world.luck import CacheGenerator, luck

__all__ = [
    "NULL_ISLAND",
    "CacheGenerator",
    "Cell",
    "CellRegistry",
    "LatLng",
    "cell_coords",
    "luck",
]
