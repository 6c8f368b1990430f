"""Number converter (priority 30).

Handles int, float and Decimal targets from strings and other numbers.
Booleans are never treated as numbers, and an int is only produced from
an integral float or Decimal.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..base_converter import BaseConverter

NUMBER_TYPES = (int, float, Decimal)


class NumberConverter(BaseConverter):
    """Converter for ``int``, ``float`` and ``decimal.Decimal``."""

    @property
    def name(self) -> str:
        """Return the converter name."""
        return "number"

    @property
    def priority(self) -> int:
        """Return the converter priority."""
        return 30

    def matches(self, target_type: type) -> bool:
        return target_type in NUMBER_TYPES

    def convert(self, target_type: type, value: Any) -> Any:
        if isinstance(value, bool):
            raise TypeError("booleans are not converted to numbers")

        if isinstance(value, str):
            value = value.strip()
        elif not isinstance(value, NUMBER_TYPES):
            raise TypeError(f"unsupported source type {type(value).__name__}")

        if target_type is int:
            return self._to_int(value)
        if target_type is float:
            return float(value)
        return self._to_decimal(value)

    def _to_int(self, value: Any) -> int:
        if isinstance(value, str):
            return int(value)
        try:
            integral = int(value)
        except OverflowError as e:
            raise ValueError(f"{value!r} is not finite") from e
        if value != integral:
            raise ValueError(f"{value!r} is not integral")
        return integral

    def _to_decimal(self, value: Any) -> Decimal:
        try:
            return Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"invalid decimal literal: {value!r}") from e
