"""Arcade views."""

from geocoin.views.game_view import GameView

__all__ = ["GameView"]
