"""Resolver bootstrap.

This module assembles the default resolver stack from configuration:

    ArgumentConvertingResolver
        -> CachingResolver (optional)
            -> ResolverChain.default()
                -> SignatureResolver

Example:
    >>> from callsite_core import bootstrap_resolver, call_method
    >>>
    >>> resolver = bootstrap_resolver()
    >>> call_method(resolver, painter, "apply", ["RED"])
    'applied:RED'
"""

from __future__ import annotations

from .components import ComponentManager
from .config import ResolverConfig, load_config
from .conversion.registry import ConversionRegistry
from .events import EventBridge
from .introspection.base_resolver import BaseResolver
from .introspection.caching_resolver import CachingResolver
from .introspection.converting_resolver import ArgumentConvertingResolver
from .introspection.resolver_chain import ResolverChain
from .logging import configure_logging, log_debug, log_info


def bootstrap_resolver(
    config: ResolverConfig | None = None,
    component_manager: ComponentManager | None = None,
) -> BaseResolver:
    """Build the resolver stack described by ``config``.

    Args:
        config: Resolver configuration. Loaded via load_config() if omitted.
        component_manager: Where the ConversionRegistry lives. Defaults to
            the ComponentManager singleton. A default registry is registered
            there unless one is already present.

    Returns:
        The outermost resolver.

    Raises:
        ConfigurationError: If the configuration is invalid.
    """
    if config is None:
        config = load_config()
    configure_logging(config.log_level)

    upstream: BaseResolver = ResolverChain.default()
    if config.cache_enabled:
        upstream = CachingResolver(upstream)

    if not config.enabled:
        log_info("Argument conversion disabled, using plain resolver chain")
        return upstream

    manager = component_manager or ComponentManager.instance()
    if manager.has_component(ConversionRegistry):
        log_debug(
            "Keeping registered ConversionRegistry, configured converters ignored",
            {"converters": config.converters},
        )
    else:
        manager.register_component(ConversionRegistry, ConversionRegistry.default(config.converters))

    events = None
    if config.emit_events:
        events = EventBridge.instance()
        events.start()

    resolver = ArgumentConvertingResolver(upstream, events=events)
    resolver.bind_components(manager)

    log_info(
        "Resolver bootstrapped",
        {"cache_enabled": config.cache_enabled, "emit_events": config.emit_events},
    )
    return resolver


__all__ = ["bootstrap_resolver"]
