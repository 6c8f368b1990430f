"""Enum converter (priority 10).

Converts names and values to enum members:
1. Exact member name ("RED" -> Color.RED)
2. Member value (1 -> Color.RED)
3. Case-insensitive member name ("red" -> Color.RED)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ...exceptions import ConversionError
from ..base_converter import BaseConverter


class EnumConverter(BaseConverter):
    """Converter for Enum subclasses."""

    @property
    def name(self) -> str:
        """Return the converter name."""
        return "enum"

    @property
    def priority(self) -> int:
        """Return the converter priority."""
        return 10

    def matches(self, target_type: type) -> bool:
        return isinstance(target_type, type) and issubclass(target_type, Enum)

    def convert(self, target_type: type, value: Any) -> Any:
        members = target_type.__members__

        if isinstance(value, str) and value in members:
            return members[value]

        try:
            return target_type(value)
        except ValueError:
            pass

        if isinstance(value, str):
            wanted = value.strip().lower()
            for member_name, member in members.items():
                if member_name.lower() == wanted:
                    return member

        raise ConversionError(
            f"Cannot convert {value!r} to {target_type.__name__}",
            target_type=target_type,
            value=value,
        )
