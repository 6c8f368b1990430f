"""Value conversion for call-site arguments.

The ConversionRegistry converts a value to a requested type using an
ordered set of converters. It is the collaborator the argument-converting
resolver relies on to coerce call-site arguments.

    from callsite_core.conversion import ConversionRegistry

    registry = ConversionRegistry.default()
    registry.convert(Color, "red")   # Color.RED
"""

from __future__ import annotations

from .base_converter import BaseConverter
from .converters import (
    BUILTIN_CONVERTERS,
    BooleanConverter,
    CollectionConverter,
    EnumConverter,
    NumberConverter,
    StringConverter,
)
from .registry import ConversionRegistry

__all__ = [
    "BaseConverter",
    "ConversionRegistry",
    "BUILTIN_CONVERTERS",
    "EnumConverter",
    "BooleanConverter",
    "NumberConverter",
    "StringConverter",
    "CollectionConverter",
]
