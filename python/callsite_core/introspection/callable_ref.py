"""Callable references returned by resolvers.

A CallableRef is the handle a resolver hands back for a specific method:
it exposes the formal parameter types directly, so downstream links never
need to dig into private state to learn the arity of an upstream answer.

Contract:
1. method_name - Declared name of the resolved method
2. parameter_types - Ordered formal positional parameter types
3. return_type - Declared return type
4. is_cacheable - Whether the reference may be reused for the same call shape
5. invoke(target, args) - Call the method on target
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from .method_descriptor import MethodDescriptor


class CallableRef(ABC):
    """Abstract handle to a resolved method."""

    @property
    @abstractmethod
    def method_name(self) -> str:
        """Declared name of the resolved method."""
        ...

    @property
    @abstractmethod
    def parameter_types(self) -> tuple[Any, ...]:
        """Formal positional parameter types, in order."""
        ...

    @property
    @abstractmethod
    def return_type(self) -> Any:
        """Declared return type of the method."""
        ...

    @property
    @abstractmethod
    def is_cacheable(self) -> bool:
        """Whether repeated lookups for the same call shape may reuse this reference."""
        ...

    @abstractmethod
    def invoke(self, target: Any, args: Sequence[Any]) -> Any:
        """Invoke the method on ``target`` with positional ``args``.

        Args:
            target: The object to invoke the method on.
            args: Positional call-site arguments.

        Returns:
            Whatever the method returns.
        """
        ...


class MethodRef(CallableRef):
    """CallableRef backed by a MethodDescriptor.

    Immutable once created.

    Example:
        >>> descriptor = find_methods(Painter, "apply", 1)[0]
        >>> ref = MethodRef(descriptor)
        >>> ref.invoke(Painter(), [Color.RED])
        'applied:RED'
    """

    def __init__(self, descriptor: MethodDescriptor, cacheable: bool = True) -> None:
        self._descriptor = descriptor
        self._cacheable = cacheable

    @property
    def descriptor(self) -> MethodDescriptor:
        """The underlying method descriptor."""
        return self._descriptor

    @property
    def method_name(self) -> str:
        return self._descriptor.name

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        return self._descriptor.parameter_types

    @property
    def return_type(self) -> Any:
        return self._descriptor.return_type

    @property
    def is_cacheable(self) -> bool:
        return self._cacheable

    def invoke(self, target: Any, args: Sequence[Any]) -> Any:
        return self._descriptor.bind(target)(*args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MethodRef):
            return NotImplemented
        return self._descriptor == other._descriptor and self._cacheable == other._cacheable

    def __hash__(self) -> int:
        return hash((self._descriptor, self._cacheable))

    def __repr__(self) -> str:
        names = ", ".join(getattr(t, "__name__", repr(t)) for t in self.parameter_types)
        return f"MethodRef({self.method_name}({names}))"


__all__ = ["CallableRef", "MethodRef"]
