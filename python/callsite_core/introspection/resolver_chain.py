"""Ordered group of method resolvers.

A ResolverChain asks its members in priority order (lower first) and
returns the first CallableRef any of them produces. Members whose
can_resolve() declines the lookup are not asked at all.

    chain = ResolverChain.default()          # SignatureResolver only
    chain.add_resolver(PropertyResolver())   # any BaseResolver
    ref = chain.resolve(painter, "apply", [Color.RED])

The chain is a BaseResolver itself, so it can sit upstream of a
converting or caching link, or inside another chain.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..logging import log_debug
from .base_resolver import BaseResolver

if TYPE_CHECKING:
    from .callable_ref import CallableRef


class ResolverChain(BaseResolver):
    """Priority-ordered composite resolver.

    Membership changes are locked; lookups iterate over a snapshot so a
    resolver added mid-lookup does not disturb it.
    """

    def __init__(self, name: str = "chain", priority: int = 0) -> None:
        self._name = name
        self._priority = priority
        self._members: list[BaseResolver] = []
        self._lock = threading.RLock()

    @classmethod
    def default(cls) -> ResolverChain:
        """Chain holding a single SignatureResolver."""
        from .signature_resolver import SignatureResolver

        return cls().add_resolver(SignatureResolver())

    @property
    def name(self) -> str:
        return self._name

    @property
    def priority(self) -> int:
        return self._priority

    def add_resolver(self, resolver: BaseResolver) -> ResolverChain:
        """Insert ``resolver`` at its priority position.

        Equal priorities keep insertion order. Returns the chain.
        """
        with self._lock:
            self._members.append(resolver)
            self._members.sort(key=lambda member: member.priority)
        return self

    def remove_resolver(self, name: str) -> BaseResolver | None:
        """Remove and return the member called ``name``, if any."""
        with self._lock:
            for index, member in enumerate(self._members):
                if member.name == name:
                    return self._members.pop(index)
        return None

    def get_resolver(self, name: str) -> BaseResolver | None:
        """Return the member called ``name``, if any."""
        return next((m for m in self._snapshot() if m.name == name), None)

    def can_resolve(self, target: Any, method_name: str) -> bool:
        return any(m.can_resolve(target, method_name) for m in self._snapshot())

    def resolve(
        self,
        target: Any,
        method_name: str,
        args: Sequence[Any],
    ) -> CallableRef | None:
        """Return the first reference produced by an eligible member, or None."""
        target_name = type(target).__name__
        for member in self._snapshot():
            if not member.can_resolve(target, method_name):
                continue
            ref = member.resolve(target, method_name, args)
            if ref is not None:
                log_debug(
                    f"ResolverChain: '{method_name}' on {target_name} resolved by '{member.name}'"
                )
                return ref
        log_debug(f"ResolverChain: '{method_name}' on {target_name} not resolved")
        return None

    @property
    def resolver_names(self) -> list[str]:
        """Member names in lookup order."""
        return [m.name for m in self._snapshot()]

    def list_resolvers(self) -> list[tuple[str, int]]:
        """(name, priority) pairs in lookup order."""
        return [(m.name, m.priority) for m in self._snapshot()]

    def chain_info(self) -> list[dict[str, Any]]:
        """Member names and priorities as dicts, for debugging output."""
        return [{"name": name, "priority": priority} for name, priority in self.list_resolvers()]

    def __len__(self) -> int:
        return len(self._members)

    def _snapshot(self) -> list[BaseResolver]:
        with self._lock:
            return list(self._members)


__all__ = ["ResolverChain"]
