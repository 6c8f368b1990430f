"""
callsite-core

Chainable dynamic method resolution with argument coercion. Given an
object, a method name and call-site argument values, resolvers decide
which method to invoke; when the plain signature match fails, arguments
are converted to the formal parameter types of a same-arity method.

Example:
    >>> import callsite_core
    >>> from enum import Enum
    >>>
    >>> class Color(Enum):
    ...     RED = 1
    ...     GREEN = 2
    ...
    >>> class Painter:
    ...     def apply(self, color: Color) -> str:
    ...         return f"applied:{color.name}"
    ...
    >>> resolver = callsite_core.bootstrap_resolver()
    >>> ref = resolver.resolve(Painter(), "apply", ["RED"])
    >>> ref.invoke(Painter(), ["GREEN"])
    'applied:GREEN'

    >>> # Or resolve and invoke in one step
    >>> callsite_core.call_method(resolver, Painter(), "APPLY", ["red"])
    'applied:RED'
"""

from __future__ import annotations

from callsite_core.bootstrap import bootstrap_resolver
from callsite_core.components import ComponentManager
from callsite_core.config import ResolverConfig, load_config
from callsite_core.conversion import (
    BaseConverter,
    BooleanConverter,
    CollectionConverter,
    ConversionRegistry,
    EnumConverter,
    NumberConverter,
    StringConverter,
)
from callsite_core.events import EventBridge, EventNames
from callsite_core.exceptions import (
    CallsiteError,
    ComponentLookupError,
    ConfigurationError,
    ConversionError,
    MethodNotFoundError,
)
from callsite_core.introspection import (
    ArgumentConvertingResolver,
    BaseResolver,
    CachingResolver,
    CallableRef,
    ConvertingCallable,
    MethodDescriptor,
    MethodRef,
    ResolverChain,
    SignatureResolver,
    convert_arguments,
    describe_methods,
    find_methods,
    overloaded,
)
from callsite_core.invocation import call_method
from callsite_core.logging import (
    configure_logging,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from callsite_core.types import LogContext

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Bootstrap and configuration
    "bootstrap_resolver",
    "ResolverConfig",
    "load_config",
    "ComponentManager",
    # Resolution
    "BaseResolver",
    "SignatureResolver",
    "ResolverChain",
    "ArgumentConvertingResolver",
    "CachingResolver",
    "CallableRef",
    "MethodRef",
    "ConvertingCallable",
    "call_method",
    # Inspection
    "MethodDescriptor",
    "describe_methods",
    "find_methods",
    "overloaded",
    # Conversion
    "ConversionRegistry",
    "BaseConverter",
    "EnumConverter",
    "BooleanConverter",
    "NumberConverter",
    "StringConverter",
    "CollectionConverter",
    "convert_arguments",
    # Events
    "EventBridge",
    "EventNames",
    # Errors
    "CallsiteError",
    "ConversionError",
    "ComponentLookupError",
    "ConfigurationError",
    "MethodNotFoundError",
    # Logging
    "LogContext",
    "configure_logging",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
