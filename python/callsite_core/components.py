"""Component lookup for lazily acquired collaborators.

The ComponentManager maps (role, hint) pairs to component instances. The
argument-converting resolver looks its ConversionRegistry up here; the
lookup may fail when the registry has not been registered yet, in which
case the resolver degrades to a pass-through.

Example:
    >>> from callsite_core import ComponentManager, ConversionRegistry
    >>>
    >>> manager = ComponentManager.instance()
    >>> manager.register_component(ConversionRegistry, ConversionRegistry.default())
    >>> registry = manager.get_instance(ConversionRegistry)
"""

from __future__ import annotations

import threading
from typing import Any, TypeVar

from .exceptions import ComponentLookupError
from .logging import log_debug, log_warn

T = TypeVar("T")


class ComponentManager:
    """Registry of component instances keyed by role and hint.

    Implements singleton pattern for process-wide component management.
    Thread-safe for concurrent registration and lookup.

    Example:
        >>> manager = ComponentManager.instance()
        >>> manager.register_component(ConversionRegistry, registry)
        >>> manager.has_component(ConversionRegistry)
        True
    """

    _instance: ComponentManager | None = None

    def __init__(self) -> None:
        """Initialize an empty ComponentManager.

        Prefer using ComponentManager.instance() to get the singleton.
        """
        self._components: dict[tuple[Any, str], Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def instance(cls) -> ComponentManager:
        """Get the singleton ComponentManager instance.

        Returns:
            The singleton ComponentManager instance.
        """
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance.

        This is primarily for testing to ensure a clean state between tests.
        """
        cls._instance = None

    def register_component(self, role: Any, component: Any, hint: str = "default") -> None:
        """Register a component instance.

        Args:
            role: Component role, usually the component's type.
            component: The instance to return on lookup.
            hint: Distinguishes several components of the same role.
        """
        key = (role, hint)
        with self._lock:
            if key in self._components:
                log_warn(f"Overwriting existing component: {_role_name(role)} (hint={hint!r})")
            self._components[key] = component
        log_debug(f"Registered component: {_role_name(role)} (hint={hint!r})")

    def unregister_component(self, role: Any, hint: str = "default") -> bool:
        """Unregister a component.

        Returns:
            True if the component was removed, False if not found.
        """
        with self._lock:
            return self._components.pop((role, hint), None) is not None

    def get_instance(self, role: type[T] | Any, hint: str = "default") -> T:
        """Look up a component.

        Args:
            role: Component role.
            hint: Component hint.

        Returns:
            The registered component.

        Raises:
            ComponentLookupError: If nothing is registered for role and hint.
        """
        with self._lock:
            key = (role, hint)
            if key not in self._components:
                raise ComponentLookupError(role, hint)
            return self._components[key]

    def has_component(self, role: Any, hint: str = "default") -> bool:
        """Check whether a component is registered."""
        return (role, hint) in self._components

    def clear(self) -> None:
        """Remove all components.

        Primarily for testing.
        """
        with self._lock:
            self._components.clear()
        log_debug("Cleared all components")


def _role_name(role: Any) -> str:
    return getattr(role, "__name__", str(role))


__all__ = ["ComponentManager"]
