"""Boolean converter (priority 20)."""

from __future__ import annotations

from typing import Any

from ..base_converter import BaseConverter

TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


class BooleanConverter(BaseConverter):
    """Converter for ``bool``.

    Strings are matched case-insensitively against true/yes/on/1 and
    false/no/off/0; numbers use their truth value.
    """

    @property
    def name(self) -> str:
        """Return the converter name."""
        return "boolean"

    @property
    def priority(self) -> int:
        """Return the converter priority."""
        return 20

    def matches(self, target_type: type) -> bool:
        return target_type is bool

    def convert(self, target_type: type, value: Any) -> Any:
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in TRUE_STRINGS:
                return True
            if normalized in FALSE_STRINGS:
                return False
            raise ValueError(f"not a boolean string: {value!r}")

        if isinstance(value, (int, float)):
            return bool(value)

        raise TypeError(f"unsupported source type {type(value).__name__}")
