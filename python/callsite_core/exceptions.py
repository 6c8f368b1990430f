"""Custom exceptions for callsite-core.

This module provides a hierarchy of exceptions for error handling
in method resolution and argument conversion.

Note that "no method matched" is never an exception inside the resolver
layer: resolvers return None and the caller decides what to report.
"""

from __future__ import annotations

from typing import Any


class CallsiteError(Exception):
    """Base exception for all callsite-core errors.

    All exceptions raised by callsite-core inherit from this class,
    making it easy to catch all resolution-related errors.

    Example:
        >>> try:
        ...     call_method(resolver, obj, "apply", ["RED"])
        ... except CallsiteError as e:
        ...     print(f"Call failed: {e}")
    """

    pass


class ConversionError(CallsiteError):
    """Raised when a value cannot be converted to a target type.

    During candidate search the converting resolver treats this as
    "candidate rejected" and moves on. During invocation of a
    ConvertingCallable it propagates to the caller.

    Attributes:
        target_type: The type the value was being converted to.
        value: The value that could not be converted.

    Example:
        >>> try:
        ...     registry.convert(Color, "PURPLE")
        ... except ConversionError as e:
        ...     print(f"Cannot convert {e.value!r} to {e.target_type}")
    """

    def __init__(
        self,
        message: str,
        *,
        target_type: Any = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.target_type = target_type
        self.value = value


class ComponentLookupError(CallsiteError):
    """Raised when a component is not registered with the ComponentManager.

    Attributes:
        role: The requested component role (usually a type).
        hint: The requested component hint.
    """

    def __init__(self, role: Any, hint: str = "default") -> None:
        role_name = getattr(role, "__name__", str(role))
        super().__init__(f"No component registered for role {role_name} (hint={hint!r})")
        self.role = role
        self.hint = hint


class ConfigurationError(CallsiteError):
    """Raised when resolver configuration is invalid.

    Common causes:
    - Malformed YAML configuration file
    - Unknown converter name
    - Field values that fail validation
    """

    pass


class MethodNotFoundError(CallsiteError):
    """Raised by call_method() when no resolver can find a method.

    Attributes:
        target_type: The runtime type that was searched.
        method_name: The requested method name.
        arity: The number of arguments supplied at the call site.
    """

    def __init__(self, target_type: type, method_name: str, arity: int) -> None:
        super().__init__(
            f"No method '{method_name}' with {arity} argument(s) "
            f"could be resolved on {target_type.__name__}"
        )
        self.target_type = target_type
        self.method_name = method_name
        self.arity = arity


__all__ = [
    "CallsiteError",
    "ConversionError",
    "ComponentLookupError",
    "ConfigurationError",
    "MethodNotFoundError",
]
