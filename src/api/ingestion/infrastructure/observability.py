"""Domain probe for telemetry repository operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TelemetryRepositoryProbe(Protocol):
    """Domain probe for telemetry repository operations."""

    def user_upserted(self, user_id: str) -> None:
        """Record that a user row was inserted or overwritten."""
        ...

    def message_appended(self, user_id: str) -> None:
        """Record that a message row was inserted."""
        ...

    def with_context(self, context: ObservationContext) -> TelemetryRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTelemetryRepositoryProbe:
    """Default implementation of TelemetryRepositoryProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultTelemetryRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultTelemetryRepositoryProbe(logger=self._logger, context=context)

    def user_upserted(self, user_id: str) -> None:
        """Record that a user row was inserted or overwritten."""
        self._logger.debug(
            "telemetry_user_upserted",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def message_appended(self, user_id: str) -> None:
        """Record that a message row was inserted."""
        self._logger.debug(
            "telemetry_message_appended",
            user_id=user_id,
            **self._get_context_kwargs(),
        )
