"""Domain probe for HTTP access logging.

Following Domain-Oriented Observability patterns, this probe records one
event per handled request.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RequestLogProbe(Protocol):
    """Domain probe for HTTP request handling."""

    def request_completed(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        client_ip: str,
    ) -> None:
        """Record that a response was produced."""
        ...

    def request_failed(
        self,
        method: str,
        path: str,
        duration_ms: float,
        client_ip: str,
        error: Exception,
    ) -> None:
        """Record that handling raised before a response was produced."""
        ...

    def with_context(self, context: ObservationContext) -> RequestLogProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRequestLogProbe:
    """Default implementation of RequestLogProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultRequestLogProbe:
        """Create a new probe with observation context bound."""
        return DefaultRequestLogProbe(logger=self._logger, context=context)

    def request_completed(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        client_ip: str,
    ) -> None:
        """Record that a response was produced."""
        self._logger.info(
            "http_request",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
            client_ip=client_ip,
            **self._get_context_kwargs(),
        )

    def request_failed(
        self,
        method: str,
        path: str,
        duration_ms: float,
        client_ip: str,
        error: Exception,
    ) -> None:
        """Record that handling raised before a response was produced."""
        self._logger.error(
            "http_request_failed",
            method=method,
            path=path,
            duration_ms=duration_ms,
            client_ip=client_ip,
            error=str(error),
            **self._get_context_kwargs(),
        )
