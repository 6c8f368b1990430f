"""Shared data models for callsite-core.

These models use Pydantic for validation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LogContext(BaseModel):
    """Context fields for structured logging.

    This model provides structured context for log messages emitted
    during resolution and invocation.

    Example:
        >>> context = LogContext(
        ...     method_name="apply",
        ...     target_type="Painter",
        ...     operation="coerce_arguments",
        ... )
        >>> log_debug("Candidate accepted", context)
    """

    correlation_id: str | None = Field(
        default=None,
        description="Correlation ID for request tracing.",
    )
    method_name: str | None = Field(
        default=None,
        description="Method name requested at the call site.",
    )
    target_type: str | None = Field(
        default=None,
        description="Name of the runtime type being searched.",
    )
    resolver: str | None = Field(
        default=None,
        description="Name of the resolver emitting the message.",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed.",
    )


__all__ = ["LogContext"]
