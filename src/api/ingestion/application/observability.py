"""Protocol for ingestion application service observability.

Defines the interface for domain probes that capture application-level
domain events for ingestion operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class IngestionServiceProbe(Protocol):
    """Domain probe for ingestion application service operations."""

    def telemetry_ingested(self, user_id: str, has_display_name: bool) -> None:
        """Record that a submission was committed."""
        ...

    def ingestion_failed(self, user_id: str, error: Exception) -> None:
        """Record that a submission was rolled back."""
        ...

    def with_context(self, context: ObservationContext) -> IngestionServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultIngestionServiceProbe:
    """Default implementation of IngestionServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultIngestionServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultIngestionServiceProbe(logger=self._logger, context=context)

    def telemetry_ingested(self, user_id: str, has_display_name: bool) -> None:
        """Record that a submission was committed."""
        self._logger.info(
            "telemetry_ingested",
            user_id=user_id,
            has_display_name=has_display_name,
            **self._get_context_kwargs(),
        )

    def ingestion_failed(self, user_id: str, error: Exception) -> None:
        """Record that a submission was rolled back."""
        self._logger.error(
            "telemetry_ingestion_failed",
            user_id=user_id,
            error=str(error),
            error_type=type(error).__name__,
            exc_info=error,
            **self._get_context_kwargs(),
        )
