"""Conversion registry.

The registry holds converters in priority order and answers
``convert(target_type, value)`` with the first converter that matches
the target type. It is shared, read-mostly state: registration is
guarded by a lock and convert() works on a snapshot of the converters,
so concurrent conversions need no locking.

Example:
    >>> registry = ConversionRegistry.default()
    >>> registry.convert(Color, "RED")
    <Color.RED: 1>
    >>> registry.convert(int, " 42 ")
    42
    >>> registry.convert(Color, "PURPLE")
    Traceback (most recent call last):
    ...
    ConversionError: Cannot convert 'PURPLE' to Color
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from ..exceptions import ConfigurationError, ConversionError
from ..logging import log_debug, log_trace, log_warn
from .base_converter import BaseConverter


class ConversionRegistry:
    """Priority-ordered registry of converters.

    Rules:
    - None passes through unchanged
    - A value that is already an instance of the target type passes through
    - A tuple target (a Union annotation) tries each member in order
    - Otherwise the first matching converter decides; any exception it
      raises (ValueError, OverflowError, ...) becomes ConversionError
    """

    def __init__(self, converters: Iterable[BaseConverter] | None = None) -> None:
        """Initialize the registry.

        Args:
            converters: Initial converters to register.
        """
        self._converters: list[BaseConverter] = []
        self._lock = threading.RLock()
        for converter in converters or ():
            self.register(converter)

    @classmethod
    def default(cls, names: Iterable[str] | None = None) -> ConversionRegistry:
        """Create a registry with the built-in converters.

        Args:
            names: Converter names to include; None means all built-ins.

        Returns:
            A populated registry.

        Raises:
            ConfigurationError: If a name is not a built-in converter.
        """
        from .converters import BUILTIN_CONVERTERS

        if names is None:
            selected = list(BUILTIN_CONVERTERS)
        else:
            selected = []
            for name in names:
                if name not in BUILTIN_CONVERTERS:
                    raise ConfigurationError(
                        f"Unknown converter: '{name}' "
                        f"(available: {', '.join(sorted(BUILTIN_CONVERTERS))})"
                    )
                selected.append(name)

        return cls(BUILTIN_CONVERTERS[name]() for name in selected)

    def register(self, converter: BaseConverter) -> ConversionRegistry:
        """Register a converter.

        A converter with the same name replaces the existing one.

        Args:
            converter: Converter to add.

        Returns:
            Self for method chaining.
        """
        with self._lock:
            existing = [c for c in self._converters if c.name == converter.name]
            if existing:
                log_warn(f"Overwriting existing converter: {converter.name}")
                self._converters = [c for c in self._converters if c.name != converter.name]
            self._converters = sorted(
                [*self._converters, converter], key=lambda c: c.priority
            )
        log_debug(f"Registered converter: {converter.name} (priority {converter.priority})")
        return self

    def unregister(self, name: str) -> bool:
        """Unregister a converter by name.

        Returns:
            True if a converter was removed.
        """
        with self._lock:
            remaining = [c for c in self._converters if c.name != name]
            removed = len(remaining) != len(self._converters)
            self._converters = remaining
        return removed

    @property
    def converter_names(self) -> list[str]:
        """Names of registered converters in priority order."""
        return [c.name for c in self._converters]

    def find_converter(self, target_type: type) -> BaseConverter | None:
        """Return the first converter that matches ``target_type``."""
        return next((c for c in self._converters if c.matches(target_type)), None)

    def can_convert(self, target_type: Any) -> bool:
        """Check whether any converter handles ``target_type``."""
        if isinstance(target_type, tuple):
            return any(self.can_convert(member) for member in target_type)
        return self.find_converter(target_type) is not None

    def convert(self, target_type: Any, value: Any) -> Any:
        """Convert ``value`` to ``target_type``.

        Args:
            target_type: A class, or a tuple of classes tried in order.
            value: The value to convert.

        Returns:
            The converted value.

        Raises:
            ConversionError: If no converter can produce the target type
                from this value.
        """
        if value is None:
            return None

        if isinstance(target_type, tuple):
            return self._convert_to_any(target_type, value)

        if isinstance(target_type, type) and isinstance(value, target_type):
            return value

        converter = self.find_converter(target_type)
        if converter is None:
            raise ConversionError(
                f"No converter registered for {_type_name(target_type)}",
                target_type=target_type,
                value=value,
            )

        try:
            converted = converter.convert(target_type, value)
        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(
                f"Cannot convert {value!r} to {_type_name(target_type)}: {e}",
                target_type=target_type,
                value=value,
            ) from e

        log_trace(f"Converted {value!r} to {converted!r} via {converter.name}")
        return converted

    def _convert_to_any(self, target_types: tuple[Any, ...], value: Any) -> Any:
        if any(isinstance(value, t) for t in target_types if isinstance(t, type)):
            return value

        errors: list[str] = []
        for member in target_types:
            try:
                return self.convert(member, value)
            except ConversionError as e:
                errors.append(str(e))

        raise ConversionError(
            f"Cannot convert {value!r} to any of "
            f"({', '.join(_type_name(t) for t in target_types)}): {'; '.join(errors)}",
            target_type=target_types,
            value=value,
        )

    def __len__(self) -> int:
        return len(self._converters)

    def __repr__(self) -> str:
        return f"ConversionRegistry(converters={self.converter_names!r})"


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", repr(target_type))


__all__ = ["ConversionRegistry"]
