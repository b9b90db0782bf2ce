"""Unit tests for PlayerManager."""

import math
import unittest
from unittest.mock import MagicMock

import pytest

from geocoin.conf import settings
from geocoin.events import GameResetEvent, PlayerMovedEvent
from geocoin.systems.geocache import Coin, CoinsCollectedEvent, CoinsDepositedEvent, GeoCache
from geocoin.systems.player import InvalidPositionError, PlayerManager, PlayerStatusChangedEvent
from geocoin.systems.player.manager import validate_position
from geocoin.world.cells import Cell, LatLng


class TestPlayerManager(unittest.TestCase):
    """Unit test class for PlayerManager."""

    def setUp(self) -> None:
        """Set up PlayerManager with a mock context."""
        self.manager = PlayerManager()

        self.mock_context = MagicMock()
        self.mock_event_bus = MagicMock()
        self.mock_context.event_bus = self.mock_event_bus
        self.mock_geocache = MagicMock()
        self.mock_context.geocache_manager = self.mock_geocache

        self.manager.setup(self.mock_context)

        self.cache = GeoCache(Cell(2, 3), [Coin(2, 3, serial) for serial in range(3)])
        self.mock_geocache.cache_at.return_value = self.cache

    def published(self) -> list:
        """Events published so far, in order."""
        return [call.args[0] for call in self.mock_event_bus.publish.call_args_list]

    def test_setup_does_not_announce_position(self) -> None:
        """Test that setup alone publishes nothing."""
        self.mock_event_bus.publish.assert_not_called()
        assert self.manager.position == LatLng(0.0, 0.0)

    def test_place_at_start_publishes_move(self) -> None:
        """Test that placing the player announces the start cell."""
        self.manager.place_at_start()

        assert self.published() == [PlayerMovedEvent(0.0, 0.0, 0, 0)]

    def test_move_by_whole_cells(self) -> None:
        """Test that move() steps one tile north and east."""
        self.manager.move(1, 0)
        self.manager.move(0, -1)

        assert self.manager.coords == (1, -1)
        event = self.published()[-1]
        assert isinstance(event, PlayerMovedEvent)
        assert (event.i, event.j) == (1, -1)
        assert event.lat == pytest.approx(1e-4)
        assert event.lng == pytest.approx(-1e-4)

    def test_teleport(self) -> None:
        """Test that teleporting lands in the cell for that position."""
        self.manager.teleport(36.9895, -122.0628)

        assert self.manager.coords == (369895, -1220628)
        assert self.manager.position == LatLng(36.9895, -122.0628)

    def test_invalid_position_leaves_state_unchanged(self) -> None:
        """Test that rejected positions are neither stored nor published."""
        for lat, lng in [(math.nan, 0.0), (0.0, math.inf), (90.5, 0.0), (0.0, -180.5)]:
            with pytest.raises(InvalidPositionError):
                self.manager.teleport(lat, lng)

        assert self.manager.position == LatLng(0.0, 0.0)
        self.mock_event_bus.publish.assert_not_called()

    def test_collect(self) -> None:
        """Test that collecting moves every coin into the inventory."""
        collected = self.manager.collect((2, 3))

        assert collected == 3
        assert self.manager.inventory == 3
        assert self.cache.coin_count == 0
        assert self.published() == [CoinsCollectedEvent(2, 3, 3), PlayerStatusChangedEvent(0, 3)]

    def test_collect_from_empty_cache(self) -> None:
        """Test that collecting an empty cache is a quiet no-op."""
        self.cache.collect()

        assert self.manager.collect((2, 3)) == 0
        assert self.manager.inventory == 0
        self.mock_event_bus.publish.assert_not_called()

    def test_collect_without_live_cache(self) -> None:
        """Test that collecting where there is no live cache does nothing."""
        self.mock_geocache.cache_at.return_value = None

        with self.assertLogs("geocoin.systems.player.manager", level="WARNING"):
            assert self.manager.collect((5, 5)) == 0

        assert self.manager.inventory == 0

    def test_deposit(self) -> None:
        """Test that depositing banks the inventory and mints fresh coins."""
        self.manager.collect((2, 3))
        self.mock_event_bus.publish.reset_mock()

        deposited = self.manager.deposit((2, 3))

        assert deposited == 3
        assert self.manager.points == 3
        assert self.manager.inventory == 0
        assert [coin.serial for coin in self.cache.coins] == [3, 4, 5]
        assert self.published() == [CoinsDepositedEvent(2, 3, 3), PlayerStatusChangedEvent(3, 0)]

    def test_deposit_with_empty_inventory(self) -> None:
        """Test that depositing nothing warns and does not touch the cache."""
        with self.assertLogs("geocoin.systems.player.manager", level="WARNING"):
            assert self.manager.deposit((2, 3)) == 0

        self.mock_geocache.cache_at.assert_not_called()
        assert self.cache.coin_count == 3

    def test_deposit_without_live_cache_keeps_inventory(self) -> None:
        """Test that a failed deposit keeps the coins in hand."""
        self.manager.collect((2, 3))
        self.mock_geocache.cache_at.return_value = None

        assert self.manager.deposit((9, 9)) == 0
        assert self.manager.inventory == 3
        assert self.manager.points == 0

    def test_collect_nearest(self) -> None:
        """Test that the nearest cache within reach is emptied."""
        self.mock_geocache.nearest_cache.return_value = self.cache

        assert self.manager.collect_nearest() == 3

        self.mock_geocache.nearest_cache.assert_called_once_with((0, 0), 1)
        self.mock_geocache.cache_at.assert_called_once_with(self.cache.cell)

    def test_collect_nearest_out_of_reach(self) -> None:
        """Test that nothing happens with no cache in reach."""
        self.mock_geocache.nearest_cache.return_value = None

        assert self.manager.collect_nearest() == 0
        assert self.manager.deposit_nearest() == 0
        self.mock_event_bus.publish.assert_not_called()

    def test_reset(self) -> None:
        """Test that reset clears counters and returns to the start."""
        self.manager.collect((2, 3))
        self.manager.deposit((2, 3))
        self.manager.collect((2, 3))
        self.manager.move(4, 4)
        self.mock_event_bus.publish.reset_mock()

        self.manager.reset()

        assert self.manager.points == 0
        assert self.manager.inventory == 0
        assert self.manager.coords == (0, 0)
        assert self.published() == [
            GameResetEvent(),
            PlayerStatusChangedEvent(0, 0),
            PlayerMovedEvent(0.0, 0.0, 0, 0),
        ]


class TestValidatePosition(unittest.TestCase):
    """Test position validation."""

    def test_valid_positions(self) -> None:
        """Test that positions on the globe are accepted as floats."""
        assert validate_position((90, -180)) == LatLng(90.0, -180.0)
        assert validate_position(LatLng(36.9895, -122.0628)) == LatLng(36.9895, -122.0628)

    def test_malformed_positions(self) -> None:
        """Test that things that are not a pair of numbers are rejected."""
        for position in [None, (1.0,), ("north", 0.0)]:
            with pytest.raises(InvalidPositionError):
                validate_position(position)  # type: ignore[arg-type]

    def test_invalid_position_is_value_error(self) -> None:
        """Test that callers can catch invalid positions as ValueError."""
        with pytest.raises(ValueError, match="finite"):
            validate_position((math.nan, 0.0))


def test_invalid_start_position() -> None:
    """Test that a bad PLAYER_START fails at setup."""
    settings.configure(PLAYER_START=(100.0, 0.0))

    with pytest.raises(InvalidPositionError):
        PlayerManager().setup(MagicMock())


def test_start_position_from_settings() -> None:
    """Test that the player starts at PLAYER_START."""
    settings.configure(PLAYER_START=(0.00025, -0.00035))
    manager = PlayerManager()
    manager.setup(MagicMock())

    assert manager.position == LatLng(0.00025, -0.00035)
    assert manager.coords == (2, -4)
