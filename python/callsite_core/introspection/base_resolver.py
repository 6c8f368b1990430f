"""Abstract base class for method resolvers.

This module defines the contract that all resolvers must implement.
Resolvers either answer a lookup directly (SignatureResolver), compose
other resolvers (ResolverChain), or wrap an upstream resolver and refine
its answer (ArgumentConvertingResolver, CachingResolver).

Resolution Contract:
1. name - Human-readable identifier for logging/debugging
2. priority - Lower numbers = tried first when placed in a ResolverChain
3. can_resolve() - Quick check if this resolver might handle the lookup
4. resolve() - Return a CallableRef, or None for "no match"

Example Implementation:
    class GetterResolver(BaseResolver):
        @property
        def name(self) -> str:
            return "getter"

        @property
        def priority(self) -> int:
            return 50

        def resolve(self, target, method_name, args):
            # Return CallableRef or None
            pass
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .callable_ref import CallableRef


class BaseResolver(ABC):
    """Abstract base class for method resolvers.

    A None result is never an error: it means "no method resolvable here"
    and callers move on to the next resolver or report the unresolved call.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this resolver (for logging/debugging).

        Returns:
            The resolver name.
        """
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Resolution priority (lower = tried first).

        Returns:
            The priority value.
        """
        ...

    def can_resolve(self, target: Any, method_name: str) -> bool:
        """Quick eligibility check (called before resolve by ResolverChain).

        Args:
            target: The object the method would be invoked on.
            method_name: The requested method name.

        Returns:
            True if this resolver might be able to resolve the lookup.
        """
        return True

    @abstractmethod
    def resolve(
        self,
        target: Any,
        method_name: str,
        args: Sequence[Any],
    ) -> CallableRef | None:
        """Resolve a method on ``target`` for the given call-site arguments.

        Args:
            target: The object the method will be invoked on.
            method_name: The requested method name.
            args: Call-site argument values.

        Returns:
            A CallableRef or None if no method matches.
        """
        ...
