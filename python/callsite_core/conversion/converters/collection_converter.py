"""Collection converter (priority 50).

Builds list, tuple, set and frozenset values. A string is treated as a
comma-separated list of items (each stripped); any other iterable is
passed to the collection constructor.

Example:
    >>> CollectionConverter().convert(list, "a, b ,c")
    ['a', 'b', 'c']
    >>> CollectionConverter().convert(tuple, [1, 2])
    (1, 2)
"""

from __future__ import annotations

from typing import Any

from ..base_converter import BaseConverter

COLLECTION_TYPES = (list, tuple, set, frozenset)


class CollectionConverter(BaseConverter):
    """Converter for built-in collection types."""

    @property
    def name(self) -> str:
        """Return the converter name."""
        return "collection"

    @property
    def priority(self) -> int:
        """Return the converter priority."""
        return 50

    def matches(self, target_type: type) -> bool:
        return target_type in COLLECTION_TYPES

    def convert(self, target_type: type, value: Any) -> Any:
        if isinstance(value, str):
            if not value.strip():
                return target_type()
            return target_type(item.strip() for item in value.split(","))

        # Raises TypeError for non-iterables
        return target_type(iter(value))
