"""Structured logging for callsite-core.

This module provides structured logging functions with a uniform
(message, fields) signature. Records are emitted on the standard
library logger named ``callsite_core``; fields travel both as
``extra={"fields": ...}`` and as a ``key=value`` suffix.

Example:
    >>> from callsite_core import log_debug, log_warn
    >>>
    >>> log_debug("Resolved method", {
    ...     "method_name": "apply",
    ...     "target_type": "Painter",
    ... })
    >>>
    >>> try:
    ...     registry.convert(Color, "PURPLE")
    ... except ConversionError as e:
    ...     log_warn(f"Conversion failed: {e}", {"error_type": type(e).__name__})
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from .types import LogContext

LOGGER_NAME = "callsite_core"
TRACE = 5

logging.addLevelName(TRACE, "TRACE")

_logger = logging.getLogger(LOGGER_NAME)


def log_error(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an ERROR level message with structured fields.

    Args:
        message: The log message.
        fields: Optional structured fields for context. Can be a dict
                or a LogContext instance.
    """
    _emit(logging.ERROR, message, fields)


def log_warn(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a WARN level message with structured fields.

    Use this for degraded operation, e.g. a converting resolver that
    could not acquire its conversion registry.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _emit(logging.WARNING, message, fields)


def log_info(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log at INFO. Lifecycle messages (bootstrap, event bridge)."""
    _emit(logging.INFO, message, fields)


def log_debug(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log at DEBUG. Resolver decisions and registrations."""
    _emit(logging.DEBUG, message, fields)


def log_trace(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log at TRACE (level 5): per-value conversions and cache hits."""
    _emit(TRACE, message, fields)


def configure_logging(level: str = "info") -> None:
    """Attach a stream handler to the package logger and set its level.

    Safe to call multiple times; the handler is only added once.

    Args:
        level: Level name (trace, debug, info, warn, warning, error).
    """
    normalized = level.upper()
    if normalized == "WARN":
        normalized = "WARNING"
    numeric = TRACE if normalized == "TRACE" else getattr(logging, normalized, logging.INFO)

    if not any(getattr(h, "_callsite_core", False) for h in _logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handler._callsite_core = True  # type: ignore[attr-defined]
        _logger.addHandler(handler)

    _logger.setLevel(numeric)


def _emit(
    level: int,
    message: str,
    fields: dict[str, Any] | LogContext | None,
) -> None:
    if not _logger.isEnabledFor(level):
        return

    fields_dict = _normalize_fields(fields)
    if fields_dict:
        suffix = " ".join(f"{k}={v}" for k, v in fields_dict.items())
        _logger.log(level, "%s %s", message, suffix, extra={"fields": fields_dict})
    else:
        _logger.log(level, message, extra={"fields": {}})


def _normalize_fields(
    fields: dict[str, Any] | LogContext | None,
) -> dict[str, str] | None:
    """Normalize fields to a dict of strings.

    Args:
        fields: Input fields as dict, LogContext, or None.

    Returns:
        Dict with string values, or None if no fields.
    """
    if fields is None:
        return None

    if isinstance(fields, LogContext):
        return {k: str(v) for k, v in fields.model_dump().items() if v is not None}

    return {k: str(v) for k, v in fields.items() if v is not None}


__all__ = [
    "LOGGER_NAME",
    "TRACE",
    "configure_logging",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
