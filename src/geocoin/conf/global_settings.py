"""Default settings for Geocoin.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from geocoin.conf import global_settings

    # Override defaults
    NEIGHBORHOOD_SIZE = 12
    WORLD_SEED = "campus"

    # Add custom systems
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "mygame.systems.leaderboard",
    ]
"""

# World grid settings
TILE_DEGREES = 1e-4
"""Edge length of one grid cell in degrees of latitude/longitude."""

WORLD_ORIGIN = (0.0, 0.0)
"""Geodetic (lat, lng) of cell (0, 0). Defaults to Null Island."""

PLAYER_START = (0.0, 0.0)
"""Geodetic (lat, lng) where the player starts and returns to on reset."""

NEIGHBORHOOD_SIZE = 8
"""Chebyshev radius, in cells, of the window where caches are materialized."""

EVICTION_DISTANCE = 9
"""Chebyshev distance, in cells, beyond which live caches are evicted.

Must be at least NEIGHBORHOOD_SIZE. A value one larger than the window keeps
caches on the window edge alive while the player steps back and forth.
"""

# Cache generation settings
CACHE_SPAWN_PROBABILITY = 0.1
"""Probability that any given cell holds a cache."""

CACHE_MIN_COINS = 1
"""Smallest number of coins a freshly spawned cache holds."""

CACHE_MAX_COINS = 5
"""Largest number of coins a freshly spawned cache holds."""

WORLD_SEED = "geocoin"
"""Seed mixed into every deterministic draw. Same seed, same world."""

# Memory settings
MEMENTO_STORE_LIMIT = None
"""Maximum number of stored cache mementos, or None for no limit.

When the limit is exceeded the least recently stored memento expires and its
cell falls back to deterministic generation on the next visit.
"""

PRUNE_CELL_REGISTRY = True
"""Forget canonical cells that are neither live nor backed by a memento."""

# Player settings
INTERACTION_DISTANCE = 1
"""Chebyshev reach, in cells, for collecting from or depositing into a cache."""

# Window settings
SCREEN_WIDTH = 1280
"""Width of the game window in pixels."""

SCREEN_HEIGHT = 720
"""Height of the game window in pixels."""

WINDOW_TITLE = "Geocoin"
"""Title displayed in the window title bar."""

CELL_PIXELS = 32
"""On-screen size of one grid cell in pixels."""

# Logging settings
LOG_LEVEL = "INFO"
"""Logging level used by create_game()."""

# Installed systems
INSTALLED_SYSTEMS = [
    "geocoin.systems.geocache",
    "geocoin.systems.player",
    "geocoin.systems.input",
]
"""List of module paths to import for system registration.

Example:
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "myproject.systems.leaderboard",
    ]
"""
