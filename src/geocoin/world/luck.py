"""Deterministic per-cell randomness.

Every decision about a cell's initial contents is a pure function of the cell
coordinates and the world seed. Nothing here draws from a shared random
stream, so the answer for a cell does not depend on which cells were asked
about before it, and a cell revisited after its memento expired is
regenerated exactly as it was first seen.

luck() hashes a string key with BLAKE2b and maps the first 53 bits of the
digest onto [0, 1), which is the full precision of a float mantissa.

Both the spawn decision and the initial coin count are keyed by cell. Coin
counts are therefore reproducible too: a cache that spawned with three coins
spawns with the same three coins (same serials) whenever it is generated
from scratch.
"""

from __future__ import annotations

import hashlib
import math
from typing import TYPE_CHECKING

from geocoin.conf import settings

if TYPE_CHECKING:
    from geocoin.world.cells import Cell

_MANTISSA_BITS = 53


def luck(key: str) -> float:
    """Map a string to a reproducible value in [0, 1).

    Args:
        key: Any string. Equal strings always map to equal values.

    Returns:
        Float in the half-open unit interval.
    """
    digest = hashlib.blake2b(key.encode("utf-8"), digest_size=8).digest()
    return (int.from_bytes(digest, "big") >> (64 - _MANTISSA_BITS)) / (1 << _MANTISSA_BITS)


class CacheGenerator:
    """Decides where caches exist and what they start with.

    Attributes:
        seed: World seed mixed into every key.
        spawn_probability: Chance that a cell holds a cache.
        min_coins: Smallest initial coin count (inclusive).
        max_coins: Largest initial coin count (inclusive).
    """

    def __init__(
        self,
        seed: str = "geocoin",
        spawn_probability: float = 0.1,
        min_coins: int = 1,
        max_coins: int = 5,
    ) -> None:
        """Initialize the generator.

        Raises:
            ValueError: If the probability is outside [0, 1] or the coin range
                is empty or negative.
        """
        if not (math.isfinite(spawn_probability) and 0.0 <= spawn_probability <= 1.0):
            msg = f"spawn_probability must be within [0, 1], got {spawn_probability!r}"
            raise ValueError(msg)
        if min_coins < 0 or min_coins > max_coins:
            msg = f"invalid coin range [{min_coins}, {max_coins}]"
            raise ValueError(msg)
        self.seed = str(seed)
        self.spawn_probability = spawn_probability
        self.min_coins = min_coins
        self.max_coins = max_coins

    @classmethod
    def from_settings(cls) -> CacheGenerator:
        """Build a generator from the global settings."""
        return cls(
            seed=settings.WORLD_SEED,
            spawn_probability=settings.CACHE_SPAWN_PROBABILITY,
            min_coins=settings.CACHE_MIN_COINS,
            max_coins=settings.CACHE_MAX_COINS,
        )

    def roll(self, cell: Cell, purpose: str) -> float:
        """Return the cell's reproducible draw for a given purpose."""
        return luck(f"{self.seed}|{cell.key}|{purpose}")

    def spawns(self, cell: Cell) -> bool:
        """Whether a cache exists at this cell when first generated."""
        return self.roll(cell, "spawn") < self.spawn_probability

    def initial_coin_count(self, cell: Cell) -> int:
        """Number of coins a freshly generated cache at this cell holds."""
        span = self.max_coins - self.min_coins + 1
        return self.min_coins + math.floor(self.roll(cell, "coins") * span)
