"""Call-site shape cache around an upstream resolver.

Keyed by (target type, method name, argument types). Only references
that report is_cacheable are stored, and "no match" is never cached.
ConvertingCallable re-converts on every invoke, so caching it by
argument-type shape is safe.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..logging import log_trace
from .base_resolver import BaseResolver

if TYPE_CHECKING:
    from .callable_ref import CallableRef

CacheKey = tuple[type, str, tuple[type, ...]]


class CachingResolver(BaseResolver):
    """Resolver link that memoizes cacheable upstream answers."""

    def __init__(self, upstream: BaseResolver, name: str = "caching", priority: int = 0) -> None:
        self._upstream = upstream
        self._name = name
        self._priority = priority
        self._cache: dict[CacheKey, CallableRef] = {}
        self._lock = threading.RLock()

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
    def size(self) -> int:
        """Number of cached references."""
        return len(self._cache)

    def can_resolve(self, target: Any, method_name: str) -> bool:
        return self._upstream.can_resolve(target, method_name)

    def resolve(
        self,
        target: Any,
        method_name: str,
        args: Sequence[Any],
    ) -> CallableRef | None:
        key: CacheKey = (type(target), method_name, tuple(type(a) for a in args))

        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            log_trace(f"CachingResolver: Cache hit for '{method_name}'")
            return cached

        ref = self._upstream.resolve(target, method_name, args)
        if ref is not None and ref.is_cacheable:
            with self._lock:
                self._cache.setdefault(key, ref)
        return ref

    def clear(self) -> None:
        """Drop all cached references."""
        with self._lock:
            self._cache.clear()


__all__ = ["CachingResolver"]
