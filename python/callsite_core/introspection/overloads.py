"""Signature overloading for methods.

Python classes cannot declare two methods with the same name; the second
definition simply replaces the first. The ``@overloaded`` decorator keeps
every definition as a separate variant so that the reflective inspector
sees one method per signature, the way a statically typed host would.

Example:
    >>> class Painter:
    ...     @overloaded
    ...     def fill(self, color: Color) -> str:
    ...         return f"color:{color.name}"
    ...
    ...     @overloaded
    ...     def fill(self, code: int) -> str:
    ...         return f"code:{code}"
    ...
    >>> Painter().fill(Color.RED)
    'color:RED'
    >>> Painter().fill(3)
    'code:3'

Variants are collected in the namespace being defined: a variant joins the
dispatcher already bound under its name in the same class body. Each class
body, including every class built by one factory function, gets its own
dispatcher.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

from .method_descriptor import SELF_PARAMETER_NAMES, normalize_annotation, resolve_type_hints


def overloaded(function: Callable[..., Any]) -> Callable[..., Any]:
    """Register ``function`` as a variant of an overloaded method.

    Must be applied directly in the class body (or module) that defines
    the method.

    Args:
        function: A plain function; every parameter that should take part
            in dispatch needs a type annotation (unannotated means any).

    Returns:
        The dispatcher bound under this name in the defining namespace.
    """
    frame = inspect.currentframe()
    try:
        namespace = frame.f_back.f_locals if frame is not None and frame.f_back else {}
        dispatcher = namespace.get(function.__name__)
    finally:
        del frame

    if not _is_dispatcher_for(dispatcher, function):
        dispatcher = _make_dispatcher(function)

    dispatcher.__overload_variants__.append(function)  # type: ignore[union-attr]
    return dispatcher  # type: ignore[return-value]


def _is_dispatcher_for(candidate: Any, function: Callable[..., Any]) -> bool:
    return (
        hasattr(candidate, "__overload_variants__")
        and getattr(candidate, "__qualname__", None) == function.__qualname__
    )


def overload_variants(function: Callable[..., Any]) -> list[Callable[..., Any]]:
    """Return the registered variants of an overloaded function.

    Returns an empty list for functions that are not overloaded.
    """
    return list(getattr(function, "__overload_variants__", []))


def _make_dispatcher(first: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(first)
    def dispatcher(*args: Any, **kwargs: Any) -> Any:
        for variant in dispatcher.__overload_variants__:  # type: ignore[attr-defined]
            if _accepts(variant, args, kwargs):
                return variant(*args, **kwargs)
        arg_types = ", ".join(type(a).__name__ for a in args)
        raise TypeError(f"No overload of {first.__qualname__} accepts ({arg_types})")

    dispatcher.__overload_variants__ = []  # type: ignore[attr-defined]
    # Keep inspect.signature from following __wrapped__ to a single variant.
    del dispatcher.__wrapped__
    return dispatcher


def _accepts(variant: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> bool:
    signature = inspect.signature(variant)
    try:
        bound = signature.bind(*args, **kwargs)
    except TypeError:
        return False

    hints = resolve_type_hints(variant)
    for index, (name, value) in enumerate(bound.arguments.items()):
        if index == 0 and name in SELF_PARAMETER_NAMES:
            continue
        parameter = signature.parameters[name]
        if parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        expected = normalize_annotation(hints.get(name, object))
        if value is not None and not isinstance(value, expected):
            return False
    return True


__all__ = ["overloaded", "overload_variants"]
