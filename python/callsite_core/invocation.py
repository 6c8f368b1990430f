"""Resolve-and-invoke helper for call sites."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .exceptions import MethodNotFoundError
from .introspection.base_resolver import BaseResolver


def call_method(
    resolver: BaseResolver,
    target: Any,
    method_name: str,
    args: Sequence[Any] = (),
) -> Any:
    """Resolve ``method_name`` on ``target`` and invoke it with ``args``.

    Args:
        resolver: Resolver (or chain) to ask.
        target: The object to invoke the method on.
        method_name: Call-site method name.
        args: Call-site argument values.

    Returns:
        The method's return value.

    Raises:
        MethodNotFoundError: If the resolver returns no method.
        ConversionError: If a converting reference cannot convert an argument.
    """
    ref = resolver.resolve(target, method_name, args)
    if ref is None:
        raise MethodNotFoundError(type(target), method_name, len(args))
    return ref.invoke(target, args)


__all__ = ["call_method"]
