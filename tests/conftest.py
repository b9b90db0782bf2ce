"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from geocoin.conf import settings
from geocoin.world.luck import CacheGenerator

if TYPE_CHECKING:
    from collections.abc import Generator

    from geocoin.world.cells import Cell


class LayoutGenerator(CacheGenerator):
    """Generator with a fixed, hand-written world.

    Only the cells in the layout hold caches, each with the given coin count.
    """

    def __init__(self, layout: dict[tuple[int, int], int]) -> None:
        super().__init__(seed="layout", spawn_probability=0.0)
        self.layout = dict(layout)
        self.spawn_calls: list[tuple[int, int]] = []

    def spawns(self, cell: Cell) -> bool:
        self.spawn_calls.append((cell.i, cell.j))
        return (cell.i, cell.j) in self.layout

    def initial_coin_count(self, cell: Cell) -> int:
        return self.layout[(cell.i, cell.j)]


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        TILE_DEGREES=1e-4,
        WORLD_ORIGIN=(0.0, 0.0),
        PLAYER_START=(0.0, 0.0),
        NEIGHBORHOOD_SIZE=8,
        EVICTION_DISTANCE=9,
        CACHE_SPAWN_PROBABILITY=0.1,
        CACHE_MIN_COINS=1,
        CACHE_MAX_COINS=5,
        WORLD_SEED="test-world",
        MEMENTO_STORE_LIMIT=None,
        PRUNE_CELL_REGISTRY=True,
        INTERACTION_DISTANCE=1,
    )
    yield
    # Reset settings after test
    settings._wrapped = None


@pytest.fixture
def layout_generator() -> type[LayoutGenerator]:
    """Factory for generators with a fixed world layout."""
    return LayoutGenerator
