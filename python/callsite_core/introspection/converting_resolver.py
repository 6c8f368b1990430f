"""Argument-converting resolver link.

Chainable resolver that tries to convert call-site arguments to formal
parameter types when the upstream answer does not fit the call. It looks
for a method matching the passed arguments and, if none is found, tries
converting the arguments to match the available signatures (same name,
same number of parameters, different parameter types). E.g.:

    painter.apply("RED")
    # is forwarded to
    painter.apply(Color.RED)
    # if Painter has apply(Color) and no apply(str)

Resolution Contract:
1. Ask the upstream resolver with the original arguments
2. No registry -> return the upstream answer unchanged
3. Convert only if upstream found nothing, or found a method whose
   parameter count differs from the number of arguments
4. Scan same-arity methods (case-insensitive name) in declaration order;
   the first whose arguments all convert is selected
5. Ask upstream again with the converted arguments and wrap its answer
   in a ConvertingCallable; otherwise fall back to the first answer

Method selection authority stays with the upstream resolver: this link
only adjusts the argument shape it is asked about.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..conversion.registry import ConversionRegistry
from ..events import EventNames
from ..exceptions import ComponentLookupError, ConversionError
from ..logging import log_debug, log_warn
from ..types import LogContext
from .argument_conversion import convert_arguments
from .base_resolver import BaseResolver
from .converting_callable import ConvertingCallable
from .method_descriptor import MethodDescriptor, find_methods

if TYPE_CHECKING:
    from ..components import ComponentManager
    from ..events import EventBridge
    from .callable_ref import CallableRef


class ArgumentConvertingResolver(BaseResolver):
    """Resolver link that coerces arguments when the upstream match is missing or off-arity.

    The conversion registry is an optional dependency. Until one is set
    (directly or through bind_components) the link is a pass-through.

    Attributes:
        upstream: The resolver consulted first, and again with converted arguments.
        registry: The conversion registry, or None when not ready.
    """

    def __init__(
        self,
        upstream: BaseResolver,
        registry: ConversionRegistry | None = None,
        *,
        events: EventBridge | None = None,
        name: str = "argument_converting",
        priority: int = 0,
    ) -> None:
        """Initialize the resolver.

        Args:
            upstream: Next resolver in the chain.
            registry: Conversion registry (may be provided later).
            events: Optional event bridge for resolution events.
            name: Resolver name for identification.
            priority: Priority when nested in a ResolverChain.
        """
        self._upstream = upstream
        self._registry = registry
        self._events = events
        self._name = name
        self._priority = priority
        self._lookup_warned = False

    @property
    def name(self) -> str:
        """Return the resolver name."""
        return self._name

    @property
    def priority(self) -> int:
        """Return the resolver priority."""
        return self._priority

    @property
    def upstream(self) -> BaseResolver:
        """Get the upstream resolver."""
        return self._upstream

    @property
    def registry(self) -> ConversionRegistry | None:
        """Get the conversion registry, if ready."""
        return self._registry

    @property
    def is_ready(self) -> bool:
        """Whether a conversion registry is available."""
        return self._registry is not None

    def set_registry(self, registry: ConversionRegistry | None) -> None:
        """Set or clear the conversion registry.

        Args:
            registry: Registry to use, or None to make the link a pass-through.
        """
        self._registry = registry

    def bind_components(self, component_manager: ComponentManager) -> bool:
        """Acquire the conversion registry from a component manager.

        A failed lookup is logged once as a warning; the resolver then
        keeps passing upstream answers through unchanged.

        Args:
            component_manager: Where to look the registry up.

        Returns:
            True if a registry was acquired.
        """
        try:
            self._registry = component_manager.get_instance(ConversionRegistry)
        except ComponentLookupError as e:
            if not self._lookup_warned:
                self._lookup_warned = True
                log_warn(
                    f"Failed to initialize {self.__class__.__name__}: {e}",
                    LogContext(resolver=self._name, operation="bind_components"),
                )
            return False
        return True

    def can_resolve(self, target: Any, method_name: str) -> bool:
        """Always eligible: conversion can find methods upstream cannot."""
        return True

    def resolve(
        self,
        target: Any,
        method_name: str,
        args: Sequence[Any],
    ) -> CallableRef | None:
        """Resolve a method, converting arguments if the upstream answer does not fit.

        Args:
            target: The object the method will be invoked on.
            method_name: The requested method name.
            args: Original call-site arguments (never modified).

        Returns:
            The upstream reference, a ConvertingCallable, or None.
        """
        initial_ref = self._upstream.resolve(target, method_name, args)

        registry = self._registry
        if registry is None:
            return initial_ref

        if initial_ref is not None and len(initial_ref.parameter_types) == len(args):
            return initial_ref

        selected = self._convert_for_candidates(registry, target, method_name, args)
        if selected is None:
            self._publish_fallback(target, method_name, initial_ref, "no_convertible_candidate")
            return initial_ref

        candidate, converted_args = selected
        converted_ref = self._upstream.resolve(target, candidate.name, converted_args)
        if converted_ref is None:
            self._publish_fallback(target, method_name, initial_ref, "upstream_rejected")
            return initial_ref

        log_debug(
            f"ArgumentConvertingResolver: Converted arguments for '{method_name}' "
            f"on {type(target).__name__}",
            LogContext(
                method_name=candidate.name,
                target_type=type(target).__name__,
                resolver=self._name,
                operation="coerce_arguments",
            ),
        )
        if self._events is not None:
            self._events.publish(
                EventNames.ARGUMENTS_CONVERTED,
                type(target),
                candidate.name,
                tuple(args),
                tuple(converted_args),
            )
        return ConvertingCallable(converted_ref, registry)

    def _convert_for_candidates(
        self,
        registry: ConversionRegistry,
        target: Any,
        method_name: str,
        args: Sequence[Any],
    ) -> tuple[MethodDescriptor, list[Any]] | None:
        """Find the first same-arity candidate whose arguments all convert.

        Returns:
            The candidate and the converted arguments, or None.
        """
        for candidate in find_methods(type(target), method_name, len(args)):
            try:
                return candidate, convert_arguments(registry, args, candidate.parameter_types)
            except ConversionError as e:
                # Ignore and try the next candidate.
                log_debug(
                    f"ArgumentConvertingResolver: Rejected candidate {candidate.name}"
                    f"{candidate.parameter_types}: {e}"
                )
                if self._events is not None:
                    self._events.publish(
                        EventNames.CANDIDATE_REJECTED, type(target), candidate, e
                    )
        return None

    def _publish_fallback(
        self,
        target: Any,
        method_name: str,
        initial_ref: CallableRef | None,
        reason: str,
    ) -> None:
        log_debug(
            f"ArgumentConvertingResolver: Falling back to upstream answer for "
            f"'{method_name}' on {type(target).__name__} ({reason})"
        )
        if self._events is not None:
            self._events.publish(
                EventNames.RESOLUTION_FALLBACK, type(target), method_name, initial_ref, reason
            )

    def __repr__(self) -> str:
        return (
            f"ArgumentConvertingResolver(upstream={self._upstream.name!r}, "
            f"ready={self.is_ready})"
        )


__all__ = ["ArgumentConvertingResolver"]
