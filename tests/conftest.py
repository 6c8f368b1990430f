"""pytest configuration and fixtures for callsite_core tests.

This module provides shared fixtures for testing resolution and conversion,
including fresh ComponentManager and EventBridge singletons and a default
ConversionRegistry.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from callsite_core import ComponentManager, ConversionRegistry, EventBridge


@pytest.fixture(scope="session")
def callsite_core_module():
    """Provide the callsite_core module as a fixture."""
    import callsite_core

    return callsite_core


@pytest.fixture
def registry() -> ConversionRegistry:
    """Provide a ConversionRegistry with all built-in converters."""
    from callsite_core import ConversionRegistry

    return ConversionRegistry.default()


@pytest.fixture
def component_manager() -> Generator[ComponentManager, None, None]:
    """Provide a fresh ComponentManager singleton for each test.

    The manager is automatically cleaned up after the test.
    """
    from callsite_core import ComponentManager

    ComponentManager.reset_instance()
    manager = ComponentManager.instance()
    yield manager
    manager.clear()
    ComponentManager.reset_instance()


@pytest.fixture
def event_bridge() -> Generator[EventBridge, None, None]:
    """Provide a fresh, started EventBridge for each test.

    The bridge is automatically stopped and reset after the test.
    """
    from callsite_core import EventBridge

    EventBridge.reset_instance()
    bridge = EventBridge.instance()
    bridge.start()
    yield bridge
    bridge.stop()
    EventBridge.reset_instance()


# Markers for test categorization
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow running",
    )
