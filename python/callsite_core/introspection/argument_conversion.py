"""Per-argument conversion against formal parameter types.

Shared by ArgumentConvertingResolver (candidate search) and
ConvertingCallable (invocation). The function is pure: the input
sequence is copied, never modified.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..conversion.registry import ConversionRegistry


def convert_arguments(
    registry: ConversionRegistry,
    args: Sequence[Any],
    parameter_types: Sequence[Any],
) -> list[Any]:
    """Convert arguments to match the given formal parameter types.

    An argument is converted only if it is not None and is not already an
    instance of its parameter type. Arguments beyond the declared
    parameters pass through unchanged.

    Args:
        registry: Conversion registry used for each mismatching argument.
        args: The call-site arguments.
        parameter_types: The formal positional parameter types.

    Returns:
        A new list of arguments.

    Raises:
        ConversionError: If any argument cannot be converted.
    """
    converted = list(args)
    for index, (value, expected) in enumerate(zip(args, parameter_types)):
        if value is not None and not isinstance(value, expected):
            converted[index] = registry.convert(expected, value)
    return converted


__all__ = ["convert_arguments"]
