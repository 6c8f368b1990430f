"""Signature resolver: exact-name, type-applicable method lookup.

This is the default upstream resolver. It mirrors what a plain
introspector does: find methods with exactly the requested name whose
declared parameter types accept the call-site arguments as they are,
then pick the most specific one. It never converts anything.

Example:
    >>> resolver = SignatureResolver()
    >>> ref = resolver.resolve(Painter(), "apply", [Color.RED])
    >>> ref.method_name
    'apply'
    >>> resolver.resolve(Painter(), "apply", ["RED"]) is None
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..logging import log_trace
from .base_resolver import BaseResolver
from .callable_ref import CallableRef, MethodRef
from .method_descriptor import MethodDescriptor, describe_methods


class SignatureResolver(BaseResolver):
    """Resolver that matches declared signatures without coercion.

    Priority 100 - the inferential baseline of the default chain.

    Applicability:
    - required positional count <= len(args) <= declared positional count
      (no upper bound for methods with ``*args``)
    - every declared argument is None or an instance of its parameter type

    Among applicable methods the most specific one wins; when no single
    method is most specific, the first declared applicable method wins.
    """

    @property
    def name(self) -> str:
        """Return the resolver name."""
        return "signature"

    @property
    def priority(self) -> int:
        """Return the resolver priority (100 = inferential)."""
        return 100

    def can_resolve(self, target: Any, method_name: str) -> bool:
        """Check if the target type has any public method with this exact name."""
        return any(d.name == method_name for d in describe_methods(type(target)))

    def resolve(
        self,
        target: Any,
        method_name: str,
        args: Sequence[Any],
    ) -> CallableRef | None:
        """Resolve the most specific applicable method.

        Args:
            target: The object the method will be invoked on.
            method_name: Exact (case-sensitive) method name.
            args: Call-site argument values.

        Returns:
            MethodRef or None if nothing is applicable.
        """
        applicable = [
            descriptor
            for descriptor in describe_methods(type(target))
            if descriptor.name == method_name and descriptor.is_applicable(args)
        ]

        if not applicable:
            log_trace(
                f"SignatureResolver: No applicable '{method_name}' on {type(target).__name__}"
            )
            return None

        return MethodRef(_most_specific(applicable))


def _most_specific(candidates: list[MethodDescriptor]) -> MethodDescriptor:
    maximal = [
        candidate
        for candidate in candidates
        if all(_at_least_as_specific(candidate, other) for other in candidates)
    ]
    if len(maximal) == 1:
        return maximal[0]
    return candidates[0]


def _at_least_as_specific(left: MethodDescriptor, right: MethodDescriptor) -> bool:
    return all(
        _is_subtype(left_type, right_type)
        for left_type, right_type in zip(left.parameter_types, right.parameter_types)
    )


def _is_subtype(left: Any, right: Any) -> bool:
    members = left if isinstance(left, tuple) else (left,)
    return all(isinstance(m, type) and issubclass(m, right) for m in members)


__all__ = ["SignatureResolver"]
