r"""Method resolution infrastructure.

This package provides the resolver chain pattern for call-site method
resolution. Resolvers are composed explicitly: a link holds a reference
to its upstream resolver instead of inheriting forwarding behaviour.

Built-in Resolvers:
- SignatureResolver (priority 100): exact name, declared parameter types
- ResolverChain: priority-ordered group of resolvers
- ArgumentConvertingResolver: coerces arguments when upstream misses
- CachingResolver: memoizes cacheable answers by call-site shape

Typical Assembly:

    from callsite_core.introspection import ArgumentConvertingResolver, ResolverChain

    resolver = ArgumentConvertingResolver(ResolverChain.default(), registry)
    ref = resolver.resolve(painter, "apply", ["RED"])
    ref.invoke(painter, ["GREEN"])

Overloads:
A class can declare several signatures under one name with @overloaded;
each variant is a separate candidate for resolution.
"""

from __future__ import annotations

from .argument_conversion import convert_arguments
from .base_resolver import BaseResolver
from .caching_resolver import CachingResolver
from .callable_ref import CallableRef, MethodRef
from .converting_callable import ConvertingCallable
from .converting_resolver import ArgumentConvertingResolver
from .method_descriptor import (
    MethodDescriptor,
    describe_function,
    describe_methods,
    find_methods,
    normalize_annotation,
)
from .overloads import overload_variants, overloaded
from .resolver_chain import ResolverChain
from .signature_resolver import SignatureResolver

__all__ = [
    # Reflective inspection
    "MethodDescriptor",
    "describe_methods",
    "describe_function",
    "find_methods",
    "normalize_annotation",
    "overloaded",
    "overload_variants",
    # References
    "CallableRef",
    "MethodRef",
    "ConvertingCallable",
    # Resolvers
    "BaseResolver",
    "SignatureResolver",
    "ResolverChain",
    "ArgumentConvertingResolver",
    "CachingResolver",
    # Conversion helper
    "convert_arguments",
]
