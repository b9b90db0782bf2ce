"""Main gameplay view.

GameView is a thin rendering collaborator: it reads the live caches and the
player's status from the systems and draws them, and it forwards key presses
to the systems. It holds no game state of its own, so the world core runs the
same with or without it.

The player is drawn at the centre of the window. Each live cache is a square
CELL_PIXELS wide, placed by its cell offset from the player's cell and
labelled with its coin count.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

from geocoin.conf import settings

if TYPE_CHECKING:
    from geocoin.systems.game_context import GameContext
    from geocoin.systems.geocache.base import GeoCache

logger = logging.getLogger(__name__)

STATUS_MARGIN = 10
STATUS_FONT_SIZE = 16
COUNT_FONT_SIZE = 10


class GameView(arcade.View):
    """Draws the neighborhood around the player and dispatches input.

    Attributes:
        context: Game context with all systems set up.
    """

    def __init__(self, context: GameContext) -> None:
        """Initialize the view.

        Args:
            context: Game context with all systems set up and the player placed.
        """
        super().__init__(context.window)
        self.context = context

        # Text objects (created on first draw for efficiency)
        self.status_text: arcade.Text | None = None
        self.count_texts: dict[tuple[int, int], arcade.Text] = {}

    def on_show_view(self) -> None:
        """Set the background when the view becomes active."""
        self.window.background_color = arcade.color.DARK_SLATE_GRAY

    def on_hide_view(self) -> None:
        """Clean up all systems when leaving the game."""
        for system in reversed(list(self.context.get_systems().values())):
            system.cleanup()
        logger.debug("GameView hidden, systems cleaned up")

    def on_update(self, delta_time: float) -> None:
        """Let every system advance one frame."""
        for system in self.context.get_systems().values():
            system.update(delta_time)

    def on_key_press(self, symbol: int, modifiers: int) -> bool:
        """Offer the key to each system until one handles it."""
        return any(system.on_key_press(symbol, modifiers) for system in self.context.get_systems().values())

    def on_draw(self) -> None:
        """Render caches, the player marker and the status line."""
        self.clear()

        center_x = self.window.width / 2
        center_y = self.window.height / 2
        player = self.context.player_manager
        player_i, player_j = player.coords

        live_cells = set()
        for cache in self.context.geocache_manager.live_caches():
            x = center_x + (cache.cell.j - player_j) * settings.CELL_PIXELS
            y = center_y + (cache.cell.i - player_i) * settings.CELL_PIXELS
            self._draw_cache(cache, x, y)
            live_cells.add((cache.cell.i, cache.cell.j))

        # Labels of caches that left the window
        for key in set(self.count_texts) - live_cells:
            del self.count_texts[key]

        arcade.draw_circle_filled(center_x, center_y, settings.CELL_PIXELS / 3, arcade.color.AZURE)
        arcade.draw_circle_outline(center_x, center_y, settings.CELL_PIXELS / 3, arcade.color.WHITE, 2)

        if self.status_text is None:
            self.status_text = arcade.Text(
                "",
                STATUS_MARGIN,
                STATUS_MARGIN,
                arcade.color.WHITE,
                STATUS_FONT_SIZE,
            )
        self.status_text.text = f"Points: {player.points}    Inventory: {player.inventory} coins"
        self.status_text.draw()

    def _draw_cache(self, cache: GeoCache, x: float, y: float) -> None:
        half = settings.CELL_PIXELS / 2
        color = arcade.color.GOLD if cache.coin_count else arcade.color.GRAY
        arcade.draw_lrbt_rectangle_filled(x - half, x + half, y - half, y + half, color)
        arcade.draw_lrbt_rectangle_outline(x - half, x + half, y - half, y + half, arcade.color.BLACK, 1)

        key = (cache.cell.i, cache.cell.j)
        text = self.count_texts.get(key)
        if text is None:
            text = arcade.Text(
                "",
                x,
                y,
                arcade.color.BLACK,
                COUNT_FONT_SIZE,
                anchor_x="center",
                anchor_y="center",
            )
            self.count_texts[key] = text
        text.x = x
        text.y = y
        text.text = str(cache.coin_count)
        text.draw()
