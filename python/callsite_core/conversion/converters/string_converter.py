"""String converter (priority 40)."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..base_converter import BaseConverter


class StringConverter(BaseConverter):
    """Converter for ``str``.

    Enum members convert to their name, bytes are decoded as UTF-8, and
    everything else uses ``str()``.
    """

    @property
    def name(self) -> str:
        """Return the converter name."""
        return "string"

    @property
    def priority(self) -> int:
        """Return the converter priority."""
        return 40

    def matches(self, target_type: type) -> bool:
        return target_type is str

    def convert(self, target_type: type, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.name
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8")
        return str(value)
