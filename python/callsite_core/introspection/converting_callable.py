"""Converting wrapper around a resolved CallableRef.

ArgumentConvertingResolver returns a ConvertingCallable when it had to
coerce arguments to find a method. The wrapper keeps the reference
usable with the original, unconverted call-site values: every invoke()
converts the supplied arguments against the wrapped method's formal
parameter types before delegating.

Example:
    >>> ref = ConvertingCallable(upstream_ref, registry)
    >>> ref.invoke(painter, ["RED"])    # calls painter.apply(Color.RED)
    'applied:RED'
    >>> ref.invoke(painter, ["GREEN"])  # converted again, independently
    'applied:GREEN'
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from .argument_conversion import convert_arguments
from .callable_ref import CallableRef

if TYPE_CHECKING:
    from ..conversion.registry import ConversionRegistry


class ConvertingCallable(CallableRef):
    """CallableRef that converts arguments on every invocation.

    Conversion is recomputed per call rather than cached from resolution
    time, so the same reference can be invoked repeatedly with different
    values (e.g. inside a loop at the call site).

    Attributes:
        inner: The wrapped CallableRef.
        registry: The registry used for conversion.
    """

    def __init__(self, inner: CallableRef, registry: ConversionRegistry) -> None:
        """Initialize the wrapper.

        Args:
            inner: The resolved reference performing the actual call.
            registry: Registry used to convert arguments.
        """
        self._inner = inner
        self._registry = registry

    @property
    def inner(self) -> CallableRef:
        """Get the wrapped reference."""
        return self._inner

    @property
    def registry(self) -> ConversionRegistry:
        """Get the conversion registry."""
        return self._registry

    @property
    def method_name(self) -> str:
        return self._inner.method_name

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        return self._inner.parameter_types

    @property
    def return_type(self) -> Any:
        return self._inner.return_type

    @property
    def is_cacheable(self) -> bool:
        return self._inner.is_cacheable

    def invoke(self, target: Any, args: Sequence[Any]) -> Any:
        """Convert ``args`` and invoke the wrapped reference.

        Args:
            target: The object to invoke the method on.
            args: Original call-site arguments.

        Returns:
            The result of the wrapped method.

        Raises:
            ConversionError: If an argument cannot be converted. A method
                has already been committed to, so this is a call-site error.
        """
        converted = convert_arguments(self._registry, args, self._inner.parameter_types)
        return self._inner.invoke(target, converted)

    def unwrap(self) -> CallableRef:
        """Get the original unwrapped reference.

        Useful for testing and debugging.
        """
        return self._inner

    def __repr__(self) -> str:
        return f"ConvertingCallable({self._inner!r})"


__all__ = ["ConvertingCallable"]
