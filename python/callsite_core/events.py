"""Resolution events published over pyee.

Resolvers built with an EventBridge report what they decided: which
arguments were converted, which candidates were rejected and when the
upstream answer was kept. Listeners are plain callables.

Example:
    >>> from callsite_core import EventBridge, EventNames
    >>>
    >>> events = EventBridge.instance()
    >>> events.start()
    >>> events.subscribe(
    ...     EventNames.ARGUMENTS_CONVERTED,
    ...     lambda target_type, name, args, converted: print(name, converted),
    ... )
    >>> resolver = ArgumentConvertingResolver(ResolverChain.default(), registry, events=events)
    >>> resolver.resolve(painter, "apply", ["RED"])
    apply (<Color.RED: 1>,)
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from pyee.base import EventEmitter

from .logging import log_debug, log_info, log_warn


class EventNames:
    """Names of the events published by resolvers.

    Attributes:
        ARGUMENTS_CONVERTED: A ConvertingCallable was returned.
        CANDIDATE_REJECTED: A same-arity candidate failed conversion.
        RESOLUTION_FALLBACK: Conversion did not help; the upstream answer was returned.
    """

    ARGUMENTS_CONVERTED = "method.arguments.converted"
    CANDIDATE_REJECTED = "method.candidate.rejected"
    RESOLUTION_FALLBACK = "method.resolution.fallback"


# Positional payload of each event, in order.
EVENT_SCHEMA: dict[str, str] = {
    EventNames.ARGUMENTS_CONVERTED: "(target_type, method_name, args, converted_args)",
    EventNames.CANDIDATE_REJECTED: "(target_type, MethodDescriptor, ConversionError)",
    EventNames.RESOLUTION_FALLBACK: "(target_type, method_name, CallableRef | None, reason)",
}


def _listener_name(listener: Callable[..., Any]) -> str:
    return getattr(listener, "__qualname__", None) or repr(listener)


class EventBridge:
    """Synchronous event bus for resolution events.

    Listeners run in the resolving thread, in subscription order. A
    stopped bridge drops published events and has no listeners.

    bootstrap_resolver() uses the process-wide instance(); resolvers
    accept any bridge.
    """

    _instance: EventBridge | None = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._emitter = EventEmitter()
        self._active = False

    @classmethod
    def instance(cls) -> EventBridge:
        """Return the process-wide bridge, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Stop and forget the process-wide bridge. Used by tests."""
        with cls._instance_lock:
            bridge, cls._instance = cls._instance, None
        if bridge is not None:
            bridge.stop()

    @property
    def is_active(self) -> bool:
        """Whether published events are delivered."""
        return self._active

    @property
    def event_schema(self) -> dict[str, str]:
        """Payload description per event name (a copy)."""
        return dict(EVENT_SCHEMA)

    def start(self) -> None:
        """Begin delivering events. No-op when already started."""
        if not self._active:
            self._active = True
            log_info("EventBridge started")

    def stop(self) -> None:
        """Stop delivering events and drop every listener. No-op when stopped."""
        if self._active:
            self._active = False
            self._emitter.remove_all_listeners()
            log_info("EventBridge stopped")

    def subscribe(self, event: str, listener: Callable[..., Any]) -> None:
        """Call ``listener`` with the event payload every time ``event`` is published."""
        self._emitter.on(event, listener)
        log_debug(f"EventBridge: {_listener_name(listener)} subscribed to {event}")

    def subscribe_once(self, event: str, listener: Callable[..., Any]) -> None:
        """Call ``listener`` for the next ``event`` only."""
        self._emitter.once(event, listener)
        log_debug(f"EventBridge: {_listener_name(listener)} subscribed once to {event}")

    def unsubscribe(self, event: str, listener: Callable[..., Any]) -> None:
        """Remove a listener added with subscribe()."""
        self._emitter.remove_listener(event, listener)
        log_debug(f"EventBridge: {_listener_name(listener)} unsubscribed from {event}")

    def listener_count(self, event: str) -> int:
        """Number of listeners currently attached to ``event``."""
        return len(self._emitter.listeners(event))

    def publish(self, event: str, *payload: Any, **details: Any) -> None:
        """Deliver an event to its listeners.

        Args:
            event: One of the EventNames, or any custom name.
            *payload: Positional values handed to each listener.
            **details: Keyword values handed to each listener.
        """
        if not self._active:
            log_warn(f"EventBridge not active, dropping event: {event}")
            return
        self._emitter.emit(event, *payload, **details)


__all__ = ["EVENT_SCHEMA", "EventBridge", "EventNames"]
