"""Base class for InputManager."""

from abc import ABC, abstractmethod

from geocoin.systems.base import BaseSystem


class InputBaseManager(BaseSystem, ABC):
    """Base class for InputManager."""

    role = "input_manager"

    @abstractmethod
    def get_movement_step(self, symbol: int) -> tuple[int, int] | None:
        """Get the (di, dj) cell step bound to a key, or None."""
        ...
