"""Reflective method inspection for runtime types.

This module turns the public methods of a class into MethodDescriptor
records carrying the information resolvers need: the method name, the
ordered positional parameter types, the return type and how to bind the
underlying function to a target.

Inspection Rules:
1. Walk the MRO most-derived first (``object`` excluded), each class
   ``__dict__`` in declaration order
2. Skip private names and names shadowed by a more-derived class
3. Plain functions, staticmethods and classmethods are described;
   other attributes are ignored
4. An @overloaded method yields one descriptor per variant

Example:
    >>> class Painter:
    ...     def apply(self, color: Color) -> str: ...
    ...
    >>> [d.name for d in describe_methods(Painter)]
    ['apply']
    >>> describe_methods(Painter)[0].parameter_types
    (<enum 'Color'>,)
"""

from __future__ import annotations

import inspect
import types
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

MethodKind = Literal["instance", "class", "static"]

SELF_PARAMETER_NAMES = ("self", "cls")

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class MethodDescriptor:
    """Description of one resolvable method (or overload variant) of a type.

    Attributes:
        name: Declared method name.
        parameter_types: Positional parameter types, ``self``/``cls`` excluded.
            Union annotations become tuples of classes.
        return_type: Declared return annotation (``typing.Any`` if absent).
        function: The underlying plain function.
        kind: How the function binds: instance, class or static.
        required_count: Number of positional parameters without defaults.
        varargs: Whether the method also accepts ``*args``.
    """

    name: str
    parameter_types: tuple[Any, ...]
    return_type: Any
    function: Callable[..., Any]
    kind: MethodKind = "instance"
    required_count: int = 0
    varargs: bool = False

    @property
    def arity(self) -> int:
        """Number of declared positional parameters."""
        return len(self.parameter_types)

    def accepts_arity(self, count: int) -> bool:
        """Check whether ``count`` positional arguments can be bound."""
        if count < self.required_count:
            return False
        return self.varargs or count <= self.arity

    def is_applicable(self, args: Sequence[Any]) -> bool:
        """Check arity and that each declared argument matches its type.

        ``None`` is accepted for any parameter type.
        """
        if not self.accepts_arity(len(args)):
            return False
        return all(
            value is None or isinstance(value, expected)
            for value, expected in zip(args, self.parameter_types)
        )

    def bind(self, target: Any) -> Callable[..., Any]:
        """Bind the underlying function to ``target``.

        Args:
            target: The object the method is invoked on.

        Returns:
            A callable taking only the call-site arguments.
        """
        if self.kind == "static":
            return self.function
        if self.kind == "class":
            owner = target if isinstance(target, type) else type(target)
            return types.MethodType(self.function, owner)
        return types.MethodType(self.function, target)


def describe_methods(cls: type) -> tuple[MethodDescriptor, ...]:
    """Describe all public methods of ``cls`` in declaration order.

    Args:
        cls: The runtime type to inspect.

    Returns:
        Tuple of descriptors, most-derived class first.
    """
    seen: set[str] = set()
    descriptors: list[MethodDescriptor] = []

    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, attribute in vars(klass).items():
            if name.startswith("_") or name in seen:
                continue
            seen.add(name)
            descriptors.extend(_describe_attribute(name, attribute))

    return tuple(descriptors)


def find_methods(
    cls: type,
    name: str,
    arity: int | None = None,
) -> list[MethodDescriptor]:
    """Find methods matching ``name`` case-insensitively.

    Args:
        cls: The runtime type to inspect.
        name: Method name (compared case-insensitively).
        arity: If given, only methods with exactly this many declared
            positional parameters are returned.

    Returns:
        Matching descriptors in declaration order.
    """
    wanted = name.lower()
    return [
        descriptor
        for descriptor in describe_methods(cls)
        if descriptor.name.lower() == wanted
        and (arity is None or descriptor.arity == arity)
    ]


def describe_function(
    name: str,
    function: Callable[..., Any],
    kind: MethodKind = "instance",
) -> MethodDescriptor:
    """Build a descriptor for a single plain function.

    Args:
        name: Name the function is exposed under.
        function: The plain function (not a bound method).
        kind: How the function binds to a target.

    Returns:
        The method descriptor.
    """
    parameters = list(inspect.signature(function).parameters.values())
    if kind != "static" and parameters and parameters[0].kind in _POSITIONAL_KINDS:
        parameters = parameters[1:]

    hints = resolve_type_hints(function)
    positional = [p for p in parameters if p.kind in _POSITIONAL_KINDS]

    return MethodDescriptor(
        name=name,
        parameter_types=tuple(
            normalize_annotation(hints.get(p.name, object)) for p in positional
        ),
        return_type=hints.get("return", Any),
        function=function,
        kind=kind,
        required_count=sum(1 for p in positional if p.default is inspect.Parameter.empty),
        varargs=any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters),
    )


def resolve_type_hints(function: Callable[..., Any]) -> dict[str, Any]:
    """Resolve a function's annotations, tolerating unresolvable names.

    Falls back to the raw annotations when ``typing.get_type_hints``
    fails; string annotations that could not be evaluated map to
    ``object``.
    """
    try:
        return typing.get_type_hints(function)
    except (NameError, TypeError, AttributeError):
        raw = getattr(function, "__annotations__", {}) or {}
        return {
            key: object if isinstance(value, str) else value for key, value in raw.items()
        }


def normalize_annotation(annotation: Any) -> Any:
    """Normalize a type annotation into something usable with isinstance.

    Returns a class, or a tuple of classes for unions.
    """
    if annotation is None or annotation is type(None):
        return type(None)
    if annotation is Any or annotation is inspect.Parameter.empty:
        return object

    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        members: list[Any] = []
        for arg in typing.get_args(annotation):
            normalized = normalize_annotation(arg)
            if isinstance(normalized, tuple):
                members.extend(normalized)
            else:
                members.append(normalized)
        return tuple(members)
    if origin is typing.Annotated:
        return normalize_annotation(typing.get_args(annotation)[0])
    if origin is Literal:
        return object
    if origin is not None:
        return origin if isinstance(origin, type) else object

    if isinstance(annotation, type):
        return annotation
    return object


def _describe_attribute(name: str, attribute: Any) -> list[MethodDescriptor]:
    if isinstance(attribute, staticmethod):
        function, kind = attribute.__func__, "static"
    elif isinstance(attribute, classmethod):
        function, kind = attribute.__func__, "class"
    elif inspect.isfunction(attribute):
        function, kind = attribute, "instance"
    else:
        return []

    variants = getattr(function, "__overload_variants__", None)
    if variants is not None:
        return [describe_function(name, variant, kind) for variant in variants]
    return [describe_function(name, function, kind)]


__all__ = [
    "MethodDescriptor",
    "describe_methods",
    "find_methods",
    "describe_function",
    "resolve_type_hints",
    "normalize_annotation",
]
