"""Tests for the lazy settings proxy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from geocoin.conf import ImproperlyConfigured, LazySettings, global_settings, settings

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """Test that unconfigured settings fall back to the global defaults."""
    fresh = LazySettings()
    fresh.configure()

    assert fresh.NEIGHBORHOOD_SIZE == global_settings.NEIGHBORHOOD_SIZE == 8
    assert fresh.EVICTION_DISTANCE == 9
    assert fresh.TILE_DEGREES == 1e-4
    assert fresh.MEMENTO_STORE_LIMIT is None


def test_configure_overrides() -> None:
    """Test that configure() replaces individual values."""
    settings.configure(NEIGHBORHOOD_SIZE=3)

    assert settings.NEIGHBORHOOD_SIZE == 3
    assert settings.EVICTION_DISTANCE == 9


def test_settings_module_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that uppercase names in the user's settings module override defaults."""
    (tmp_path / "geocoin_world_settings.py").write_text('WORLD_SEED = "campus"\nCELL_PIXELS = 16\nhelper = 1\n')
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.setenv("GEOCOIN_SETTINGS_MODULE", "geocoin_world_settings")

    fresh = LazySettings()

    assert not fresh.is_configured()
    assert fresh.WORLD_SEED == "campus"
    assert fresh.CELL_PIXELS == 16
    assert fresh.NEIGHBORHOOD_SIZE == 8
    assert fresh.is_configured()
    assert not hasattr(fresh, "helper")


def test_missing_settings_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a missing settings module leaves the defaults in place."""
    monkeypatch.setenv("GEOCOIN_SETTINGS_MODULE", "geocoin_no_such_settings")

    fresh = LazySettings()

    assert fresh.WORLD_SEED == global_settings.WORLD_SEED


def test_attribute_assignment() -> None:
    """Test that settings can be assigned like attributes."""
    settings.WORLD_SEED = "assigned"

    assert settings.WORLD_SEED == "assigned"


@pytest.mark.parametrize(
    ("options", "message"),
    [
        ({"TILE_DEGREES": 0.0}, "TILE_DEGREES"),
        ({"TILE_DEGREES": float("nan")}, "TILE_DEGREES"),
        ({"NEIGHBORHOOD_SIZE": -1}, "NEIGHBORHOOD_SIZE"),
        ({"EVICTION_DISTANCE": 7}, "EVICTION_DISTANCE"),
        ({"CACHE_SPAWN_PROBABILITY": 1.5}, "CACHE_SPAWN_PROBABILITY"),
        ({"CACHE_MIN_COINS": 6}, "coin range"),
        ({"CACHE_MIN_COINS": -1}, "coin range"),
        ({"MEMENTO_STORE_LIMIT": 0}, "MEMENTO_STORE_LIMIT"),
        ({"INTERACTION_DISTANCE": -1}, "INTERACTION_DISTANCE"),
    ],
)
def test_configure_rejects_impossible_worlds(options: dict, message: str) -> None:
    """Test that inconsistent world settings are refused and leave the old values."""
    with pytest.raises(ImproperlyConfigured, match=message):
        settings.configure(**options)

    assert settings.EVICTION_DISTANCE == 9
    assert settings.TILE_DEGREES == 1e-4


def test_related_settings_change_together() -> None:
    """Test that a window and eviction distance can be raised in one call."""
    settings.configure(NEIGHBORHOOD_SIZE=12, EVICTION_DISTANCE=13)

    assert (settings.NEIGHBORHOOD_SIZE, settings.EVICTION_DISTANCE) == (12, 13)


def test_invalid_settings_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a user settings module is validated when it is loaded."""
    (tmp_path / "geocoin_broken_settings.py").write_text("NEIGHBORHOOD_SIZE = 10\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.setenv("GEOCOIN_SETTINGS_MODULE", "geocoin_broken_settings")

    fresh = LazySettings()

    with pytest.raises(ImproperlyConfigured, match="EVICTION_DISTANCE"):
        _ = fresh.WORLD_SEED
    assert not fresh.is_configured()


def test_validate_after_assignment() -> None:
    """Test that values assigned one by one are checked by validate()."""
    settings.CACHE_MAX_COINS = 0

    with pytest.raises(ImproperlyConfigured, match="coin range"):
        settings.validate()


def test_improperly_configured_is_value_error() -> None:
    """Test that configuration errors can be caught as ValueError."""
    assert issubclass(ImproperlyConfigured, ValueError)
