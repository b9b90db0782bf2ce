"""Unit tests for the deterministic generator."""

import math
import unittest

import pytest

from geocoin.conf import settings
from geocoin.world.cells import Cell
from geocoin.world.luck import CacheGenerator, luck


class TestLuck(unittest.TestCase):
    """Test the luck() hash."""

    def test_same_key_same_value(self) -> None:
        """Test that luck is a pure function of its key."""
        assert luck("2,3") == luck("2,3")

    def test_values_in_unit_interval(self) -> None:
        """Test that every value lies in [0, 1)."""
        for n in range(1000):
            value = luck(f"key-{n}")
            assert 0.0 <= value < 1.0

    def test_different_keys_differ(self) -> None:
        """Test that neighbouring keys do not collide."""
        values = {luck(f"0,{j}") for j in range(100)}

        assert len(values) == 100


class TestCacheGenerator(unittest.TestCase):
    """Test spawn decisions and initial coin counts."""

    def setUp(self) -> None:
        """Create a generator with the default probability."""
        self.generator = CacheGenerator(seed="unit", spawn_probability=0.1)
        self.cells = [Cell(i, j) for i in range(-10, 11) for j in range(-10, 11)]

    def test_spawn_decision_is_independent_of_query_order(self) -> None:
        """Test that the same cell gives the same answer whatever was asked before."""
        forward = {cell: self.generator.spawns(cell) for cell in self.cells}

        # Query in reverse, interleaved with unrelated far-away cells
        backward = {}
        for cell in reversed(self.cells):
            self.generator.spawns(Cell(cell.i + 1000, cell.j - 1000))
            backward[cell] = self.generator.spawns(cell)

        assert forward == backward

    def test_same_seed_same_world(self) -> None:
        """Test that two generators with the same seed agree everywhere."""
        other = CacheGenerator(seed="unit", spawn_probability=0.1)

        for cell in self.cells:
            assert other.spawns(cell) == self.generator.spawns(cell)
            assert other.initial_coin_count(cell) == self.generator.initial_coin_count(cell)

    def test_different_seed_different_world(self) -> None:
        """Test that changing the seed changes at least some decisions."""
        first = CacheGenerator(seed="alpha", spawn_probability=0.5)
        second = CacheGenerator(seed="beta", spawn_probability=0.5)

        assert any(first.spawns(cell) != second.spawns(cell) for cell in self.cells)

    def test_spawn_rate_matches_probability(self) -> None:
        """Test that roughly the configured share of cells spawn a cache."""
        spawned = sum(self.generator.spawns(Cell(i, j)) for i in range(100) for j in range(100))

        assert 800 <= spawned <= 1200

    def test_probability_bounds(self) -> None:
        """Test that probability 0 never spawns and 1 always spawns."""
        never = CacheGenerator(spawn_probability=0.0)
        always = CacheGenerator(spawn_probability=1.0)

        assert not any(never.spawns(cell) for cell in self.cells)
        assert all(always.spawns(cell) for cell in self.cells)

    def test_coin_counts_within_range(self) -> None:
        """Test that initial coin counts cover exactly the configured range."""
        counts = {self.generator.initial_coin_count(cell) for cell in self.cells}

        assert counts == {1, 2, 3, 4, 5}

    def test_fixed_coin_count(self) -> None:
        """Test that an empty-width range always yields its single value."""
        generator = CacheGenerator(min_coins=3, max_coins=3)

        assert {generator.initial_coin_count(cell) for cell in self.cells} == {3}

    def test_invalid_configuration(self) -> None:
        """Test that impossible settings are rejected."""
        for probability in (-0.1, 1.5, math.nan):
            with pytest.raises(ValueError, match="spawn_probability"):
                CacheGenerator(spawn_probability=probability)
        with pytest.raises(ValueError, match="coin range"):
            CacheGenerator(min_coins=4, max_coins=2)
        with pytest.raises(ValueError, match="coin range"):
            CacheGenerator(min_coins=-1, max_coins=2)


def test_from_settings() -> None:
    """Test that the generator picks up configured values."""
    settings.configure(WORLD_SEED="campus", CACHE_SPAWN_PROBABILITY=0.25, CACHE_MIN_COINS=2, CACHE_MAX_COINS=7)

    generator = CacheGenerator.from_settings()

    assert generator.seed == "campus"
    assert generator.spawn_probability == 0.25
    assert (generator.min_coins, generator.max_coins) == (2, 7)
