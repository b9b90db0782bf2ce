"""Helper functions for creating and running Geocoin.

Users can choose between run_game(), which opens a window and blocks, and
create_world(), which builds the systems without any window for scripting,
simulations and tests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade
from rich.logging import RichHandler

from geocoin.conf import settings
from geocoin.events import EventBus
from geocoin.systems.game_context import GameContext
from geocoin.systems.loader import SystemLoader
from geocoin.views import GameView

if TYPE_CHECKING:
    from geocoin.world.luck import CacheGenerator

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "DEBUG") -> None:
    """Configure logging for the game.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_world(
    window: arcade.Window | None = None,
    generator: CacheGenerator | None = None,
) -> GameContext:
    """Build all installed systems and place the player at the start.

    Args:
        window: Arcade window to attach to the context, if any.
        generator: Cache generator to use instead of one built from settings.

    Returns:
        Game context with every system set up and the first neighborhood window
        already computed.

    Example:
        >>> context = create_world()
        >>> context.player_manager.move(1, 0)
        >>> caches = context.geocache_manager.live_caches()
    """
    context = GameContext(event_bus=EventBus(), window=window)

    loader = SystemLoader(settings)
    loader.instantiate_all()
    loader.setup_all(context)

    if generator is not None:
        context.geocache_manager.set_generator(generator)

    context.player_manager.place_at_start()
    logger.info("World ready with systems: %s", ", ".join(loader.load_order))
    return context


def create_game() -> arcade.Window:
    """Create a game window showing the world around the start position.

    Returns:
        Configured arcade.Window with the GameView shown.

    Side effects:
        - Configures logging via setup_logging()
        - Creates arcade.Window instance
    """
    setup_logging(settings.LOG_LEVEL)

    window = arcade.Window(
        settings.SCREEN_WIDTH,
        settings.SCREEN_HEIGHT,
        settings.WINDOW_TITLE,
    )
    context = create_world(window=window)
    window.show_view(GameView(context))
    return window


def run_game() -> None:
    """Create and run the game.

    Side effects:
        - Creates the window via create_game()
        - Starts arcade.run() game loop (blocks until window closes)

    Example:
        >>> from geocoin import run_game
        >>> if __name__ == "__main__":
        ...     run_game()
    """
    create_game()
    arcade.run()
