"""Loader for pluggable systems.

The SystemLoader handles:
1. Importing system modules to trigger registration
2. Resolving dependencies and ordering systems so dependencies come first
3. Instantiating systems and registering them with the GameContext
4. Coordinating setup and cleanup across all systems
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from geocoin.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from geocoin.conf import LazySettings
    from geocoin.systems.base import BaseSystem
    from geocoin.systems.game_context import GameContext

logger = logging.getLogger(__name__)


class MissingDependencyError(Exception):
    """A system depends on a system that is not registered."""


class CircularDependencyError(Exception):
    """Systems depend on each other in a cycle."""


class SystemLoader:
    """Loads and manages system instances."""

    def __init__(self, settings: LazySettings) -> None:
        """Initialize the system loader.

        Args:
            settings: Settings object providing INSTALLED_SYSTEMS.
        """
        self.settings = settings
        self._instances: dict[str, BaseSystem] = {}
        self._load_order: list[str] = []

    @property
    def load_order(self) -> list[str]:
        """Names of instantiated systems, dependencies first."""
        return list(self._load_order)

    def load_modules(self) -> None:
        """Import all configured system modules to trigger registration."""
        for module_path in self.settings.INSTALLED_SYSTEMS or []:
            try:
                importlib.import_module(module_path)
                logger.debug("Loaded system module: %s", module_path)
            except ImportError:
                logger.exception("Could not load system module '%s'", module_path)
                raise

    def instantiate_all(self) -> dict[str, BaseSystem]:
        """Create instances of all registered systems in dependency order.

        Returns:
            Dictionary mapping system names to their instances.

        Raises:
            MissingDependencyError: If a dependency is not registered.
            CircularDependencyError: If dependencies form a cycle.
        """
        self.load_modules()

        all_systems = SystemRegistry.get_all()
        if not all_systems:
            logger.warning("No systems registered")
            return {}

        self._load_order = self._resolve_order(all_systems)
        for name in self._load_order:
            self._instances[name] = all_systems[name]()
            logger.debug("Instantiated system: %s", name)

        logger.info("Instantiated %d systems", len(self._instances))
        return self._instances

    def setup_all(self, context: GameContext) -> None:
        """Register every system with the context, then set them up in order."""
        for name in self._load_order:
            context.register_system(name, self._instances[name])
        for name in self._load_order:
            self._instances[name].setup(context)
            logger.debug("Set up system: %s", name)

    def cleanup_all(self) -> None:
        """Clean up all systems in reverse load order."""
        for name in reversed(self._load_order):
            self._instances[name].cleanup()
        logger.debug("Cleaned up all systems")

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a system instance by name."""
        return self._instances.get(name)

    @staticmethod
    def _resolve_order(systems: dict[str, type[BaseSystem]]) -> list[str]:
        """Depth-first topological sort; independent systems sort by name."""
        order: list[str] = []
        visiting: set[str] = set()
        done: set[str] = set()

        def visit(name: str, chain: list[str]) -> None:
            if name in done:
                return
            if name in visiting:
                msg = f"Circular dependency: {' -> '.join([*chain, name])}"
                raise CircularDependencyError(msg)
            visiting.add(name)
            for dependency in systems[name].dependencies:
                if dependency not in systems:
                    msg = f"System '{name}' depends on unknown system '{dependency}'"
                    raise MissingDependencyError(msg)
                visit(dependency, [*chain, name])
            visiting.discard(name)
            done.add(name)
            order.append(name)

        for name in sorted(systems):
            visit(name, [])
        return order
