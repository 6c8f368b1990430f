"""Abstract base class for value converters.

Converter Contract:
1. name - Identifier used in configuration and unregister()
2. priority - Lower numbers = consulted first by the registry
3. matches(target_type) - Whether this converter produces target_type
4. convert(target_type, value) - Produce a target_type value or raise

Converters may raise any exception for bad input (ValueError, TypeError,
OverflowError, ...); the registry reports it as ConversionError.

Example Implementation:
    class PathConverter(BaseConverter):
        @property
        def name(self) -> str:
            return "path"

        @property
        def priority(self) -> int:
            return 60

        def matches(self, target_type: type) -> bool:
            return isinstance(target_type, type) and issubclass(target_type, Path)

        def convert(self, target_type: type, value: Any) -> Any:
            return target_type(str(value))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseConverter(ABC):
    """Abstract base class for converters held by a ConversionRegistry."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Converter name."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lookup priority (lower = first)."""
        ...

    @abstractmethod
    def matches(self, target_type: type) -> bool:
        """Check whether this converter can produce ``target_type``."""
        ...

    @abstractmethod
    def convert(self, target_type: type, value: Any) -> Any:
        """Convert ``value`` to ``target_type``.

        Args:
            target_type: The requested type.
            value: A non-None value that is not already a ``target_type``.

        Returns:
            The converted value.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority})"
