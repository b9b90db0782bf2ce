"""Registry for pluggable systems.

Systems register themselves with the @SystemRegistry.register decorator when
their module is imported. The SystemLoader imports every module listed in
INSTALLED_SYSTEMS and then instantiates whatever got registered.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from geocoin.systems.base import BaseSystem

logger = logging.getLogger(__name__)


class SystemRegistry:
    """Central registry for all system classes.

    Class Attributes:
        _systems: Dictionary mapping system names to their classes.
    """

    _systems: ClassVar[dict[str, type[BaseSystem]]] = {}

    @classmethod
    def register(cls, system_class: type[BaseSystem]) -> type[BaseSystem]:
        """Register a system class.

        Used as a decorator on system classes.

        Args:
            system_class: The system class to register.

        Returns:
            The same class, allowing use as a decorator.

        Raises:
            ValueError: If the class doesn't define a 'name' attribute.
        """
        if not getattr(system_class, "name", None):
            msg = f"System {system_class.__name__} must define a 'name' class attribute"
            raise ValueError(msg)

        previous = cls._systems.get(system_class.name)
        if previous is not None and previous is not system_class:
            logger.warning(
                "System '%s' is being re-registered (was %s, now %s)",
                system_class.name,
                previous.__name__,
                system_class.__name__,
            )

        cls._systems[system_class.name] = system_class
        logger.debug("Registered system: %s", system_class.name)
        return system_class

    @classmethod
    def get(cls, name: str) -> type[BaseSystem] | None:
        """Get a registered system class by name."""
        return cls._systems.get(name)

    @classmethod
    def get_all(cls) -> dict[str, type[BaseSystem]]:
        """Get all registered systems."""
        return cls._systems.copy()

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a system is registered."""
        return name in cls._systems

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a system from the registry (for testing)."""
        cls._systems.pop(name, None)

    @classmethod
    def clear(cls) -> None:
        """Clear the registry (for testing)."""
        cls._systems.clear()
        logger.debug("System registry cleared")
