"""Built-in converter implementations.

This module provides the default converters for ConversionRegistry.default():
- EnumConverter (priority 10): member name, value, or case-insensitive name
- BooleanConverter (priority 20): true/false strings and numbers
- NumberConverter (priority 30): int, float, Decimal
- StringConverter (priority 40): str, enum names, decoded bytes
- CollectionConverter (priority 50): list, tuple, set, frozenset
"""

from __future__ import annotations

from .boolean_converter import BooleanConverter
from .collection_converter import CollectionConverter
from .enum_converter import EnumConverter
from .number_converter import NumberConverter
from .string_converter import StringConverter

BUILTIN_CONVERTERS = {
    "enum": EnumConverter,
    "boolean": BooleanConverter,
    "number": NumberConverter,
    "string": StringConverter,
    "collection": CollectionConverter,
}

__all__ = [
    "BUILTIN_CONVERTERS",
    "EnumConverter",
    "BooleanConverter",
    "NumberConverter",
    "StringConverter",
    "CollectionConverter",
]
