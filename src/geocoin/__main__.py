"""Allow running the game with ``python -m geocoin``."""

from geocoin.helpers import run_game

if __name__ == "__main__":
    run_game()
