"""Events related to the player's score and inventory."""

from dataclasses import dataclass

from geocoin.events import Event


@dataclass
class PlayerStatusChangedEvent(Event):
    """Fired when points or inventory change.

    A status panel subscribes to this to refresh "Points" and "Inventory".

    Attributes:
        points: Banked score after the change.
        inventory: Coins held after the change.
    """

    points: int
    inventory: int
