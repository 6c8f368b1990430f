"""Resolver configuration.

Configuration is a small Pydantic model that can be loaded from a YAML
file. The file path comes from the argument to load_config() or from
the CALLSITE_CORE_CONFIG environment variable; without either, the
defaults are used.

Example YAML:

    callsite_core:
      enabled: true
      cache_enabled: true
      converters: [enum, number, boolean]
      log_level: debug
      emit_events: false
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError
from .logging import log_debug

CONFIG_ENV_VAR = "CALLSITE_CORE_CONFIG"
CONFIG_ROOT_KEY = "callsite_core"


class ResolverConfig(BaseModel):
    """Configuration for bootstrap_resolver().

    Example:
        >>> config = ResolverConfig(cache_enabled=True, log_level="debug")
        >>> resolver = bootstrap_resolver(config)
    """

    enabled: bool = Field(
        default=True,
        description="Install the argument-converting link on top of the chain.",
    )
    cache_enabled: bool = Field(
        default=False,
        description="Wrap the upstream chain in a CachingResolver.",
    )
    converters: list[str] | None = Field(
        default=None,
        description=(
            "Built-in converter names to register. None registers all. "
            "Ignored when a ConversionRegistry is already registered."
        ),
    )
    log_level: str = Field(
        default="info",
        description="Log level for the callsite_core logger.",
    )
    emit_events: bool = Field(
        default=False,
        description="Start the EventBridge and publish resolution events.",
    )


def load_config(path: str | Path | None = None) -> ResolverConfig:
    """Load resolver configuration from YAML.

    Args:
        path: YAML file to read. Defaults to $CALLSITE_CORE_CONFIG.

    Returns:
        The validated configuration (defaults if no file is configured).

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or does not validate.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return ResolverConfig()
        path = env_path

    config_file = Path(path)
    try:
        with config_file.open() as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read config {config_file}: {e}") from e

    log_debug(f"Loaded resolver config from {config_file}")
    return config_from_dict(data)


def config_from_dict(data: Any) -> ResolverConfig:
    """Validate parsed configuration data.

    Accepts either the settings mapping itself or a mapping with a
    top-level ``callsite_core`` key. Empty input yields the defaults.

    Raises:
        ConfigurationError: If the data is not a mapping or fails validation.
    """
    if data is None:
        return ResolverConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config must be a mapping, got {type(data).__name__}")

    section = data.get(CONFIG_ROOT_KEY, data)
    if section is None:
        return ResolverConfig()
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{CONFIG_ROOT_KEY}' must be a mapping")

    try:
        return ResolverConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid resolver config: {e}") from e


__all__ = ["CONFIG_ENV_VAR", "ResolverConfig", "config_from_dict", "load_config"]
