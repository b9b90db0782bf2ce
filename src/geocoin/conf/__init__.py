"""Django-like settings system for Geocoin.

Usage:
    # In your project's settings.py
    from geocoin.conf import global_settings

    # Override defaults
    NEIGHBORHOOD_SIZE = 12
    CACHE_SPAWN_PROBABILITY = 0.05
    WORLD_SEED = "my-world"

    # In your game code
    from geocoin.conf import settings

    print(settings.NEIGHBORHOOD_SIZE)  # 12

World settings are checked as a whole whenever they are loaded or
configured, so an impossible world (an eviction distance inside the spawn
window, an empty coin range, a zero tile size) fails before any system
starts instead of halfway through a window recomputation.
"""

from __future__ import annotations

import importlib
import logging
import math
import os
from typing import Any

from geocoin.conf import global_settings

logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLE = "GEOCOIN_SETTINGS_MODULE"
DEFAULT_SETTINGS_MODULE = "settings"


class ImproperlyConfigured(ValueError):  # noqa: N818
    """World settings are inconsistent or out of range."""


class Settings:
    """Container for all settings with attribute access.

    Starts from global_settings. Values from a user settings module or from
    configure() are layered on top with update().
    """

    def __init__(self) -> None:
        """Initialize settings with defaults from global_settings."""
        self.update(_uppercase(global_settings))

    def update(self, values: dict[str, Any]) -> None:
        """Overwrite settings with the given UPPERCASE values."""
        for name, value in values.items():
            setattr(self, name, value)

    def validate(self) -> None:
        """Check the world settings against each other.

        Raises:
            ImproperlyConfigured: Naming the first setting that is invalid.
        """
        tile = self.TILE_DEGREES
        if not (isinstance(tile, (int, float)) and math.isfinite(tile) and tile > 0):
            msg = f"TILE_DEGREES must be a positive finite number, got {tile!r}"
            raise ImproperlyConfigured(msg)

        if self.NEIGHBORHOOD_SIZE < 0:
            msg = f"NEIGHBORHOOD_SIZE must not be negative, got {self.NEIGHBORHOOD_SIZE}"
            raise ImproperlyConfigured(msg)
        if self.EVICTION_DISTANCE < self.NEIGHBORHOOD_SIZE:
            msg = (
                f"EVICTION_DISTANCE ({self.EVICTION_DISTANCE}) must be at least "
                f"NEIGHBORHOOD_SIZE ({self.NEIGHBORHOOD_SIZE})"
            )
            raise ImproperlyConfigured(msg)

        probability = self.CACHE_SPAWN_PROBABILITY
        if not (math.isfinite(probability) and 0.0 <= probability <= 1.0):
            msg = f"CACHE_SPAWN_PROBABILITY must be within [0, 1], got {probability!r}"
            raise ImproperlyConfigured(msg)
        if self.CACHE_MIN_COINS < 0 or self.CACHE_MIN_COINS > self.CACHE_MAX_COINS:
            msg = f"Invalid coin range CACHE_MIN_COINS={self.CACHE_MIN_COINS}, CACHE_MAX_COINS={self.CACHE_MAX_COINS}"
            raise ImproperlyConfigured(msg)

        limit = self.MEMENTO_STORE_LIMIT
        if limit is not None and limit < 1:
            msg = f"MEMENTO_STORE_LIMIT must be None or at least 1, got {limit}"
            raise ImproperlyConfigured(msg)
        if self.INTERACTION_DISTANCE < 0:
            msg = f"INTERACTION_DISTANCE must not be negative, got {self.INTERACTION_DISTANCE}"
            raise ImproperlyConfigured(msg)


class LazySettings:
    """Lazy settings proxy that loads user settings on first access.

    Settings are loaded from:
    1. global_settings (framework defaults)
    2. User's settings module (overrides)

    The settings module location is determined by:
    - GEOCOIN_SETTINGS_MODULE environment variable, or
    - Convention: "settings" module in current directory
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        """Load defaults, layer the user's settings module on top and validate.

        Raises:
            ImproperlyConfigured: If the combined settings are invalid.
        """
        settings_module = os.environ.get(ENVIRONMENT_VARIABLE, DEFAULT_SETTINGS_MODULE)
        wrapped = Settings()

        try:
            mod = importlib.import_module(settings_module)
        except ImportError:
            logger.debug("No settings module '%s', using defaults", settings_module)
        else:
            wrapped.update(_uppercase(mod))
            logger.debug("Loaded settings from '%s'", settings_module)

        wrapped.validate()
        self._wrapped = wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        if self._wrapped is None:
            self._setup()
        return getattr(self._wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a single setting value.

        Values set this way are not validated until validate() runs, so related
        settings can be changed one at a time.
        """
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
            return
        if self._wrapped is None:
            self._setup()
        setattr(self._wrapped, name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Manually configure settings (useful for testing).

        The options are applied together and the result is validated, so
        related values such as NEIGHBORHOOD_SIZE and EVICTION_DISTANCE can be
        changed in one call. Invalid options leave the settings untouched.

        Example:
            settings.configure(
                NEIGHBORHOOD_SIZE=4,
                EVICTION_DISTANCE=5,
            )

        Raises:
            ImproperlyConfigured: If the resulting settings are invalid.
        """
        candidate = Settings()
        if self._wrapped is not None:
            candidate.update(vars(self._wrapped))
        candidate.update(options)
        candidate.validate()
        self._wrapped = candidate

    def validate(self) -> None:
        """Validate the current settings.

        Raises:
            ImproperlyConfigured: If the settings are invalid.
        """
        if self._wrapped is None:
            self._setup()
            return
        self._wrapped.validate()

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None


def _uppercase(module: object) -> dict[str, Any]:
    return {name: getattr(module, name) for name in dir(module) if name.isupper()}


# Global singleton instance
settings = LazySettings()

__all__ = ["ImproperlyConfigured", "LazySettings", "Settings", "global_settings", "settings"]
