"""Domain probe for application startup and lifecycle events.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events during application initialization and shutdown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def service_starting(self, host: str, port: int, environment: str) -> None:
        """Record that the HTTP server is about to listen."""
        ...

    def service_stopped(self) -> None:
        """Record that the application finished shutting down."""
        ...

    def api_token_not_configured(self) -> None:
        """Record that no bearer secret is set (protected routes will 401)."""
        ...

    def database_url_missing(self, error: str) -> None:
        """Record that the database URL is missing or invalid (fatal)."""
        ...

    def settings_invalid(self, error: str) -> None:
        """Record that another setting failed validation (fatal)."""
        ...

    def with_context(self, context: ObservationContext) -> StartupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultStartupProbe:
        """Create a new probe with observation context bound."""
        return DefaultStartupProbe(logger=self._logger, context=context)

    def service_starting(self, host: str, port: int, environment: str) -> None:
        """Record that the HTTP server is about to listen."""
        self._logger.info(
            "service_starting",
            host=host,
            port=port,
            environment=environment,
            **self._get_context_kwargs(),
        )

    def service_stopped(self) -> None:
        """Record that the application finished shutting down."""
        self._logger.info(
            "service_stopped",
            **self._get_context_kwargs(),
        )

    def api_token_not_configured(self) -> None:
        """Record that no bearer secret is set (protected routes will 401)."""
        self._logger.warning(
            "api_token_not_configured",
            detail="Protected requests will fail with 401",
            **self._get_context_kwargs(),
        )

    def database_url_missing(self, error: str) -> None:
        """Record that the database URL is missing or invalid (fatal)."""
        self._logger.critical(
            "database_url_missing",
            error=error,
            **self._get_context_kwargs(),
        )

    def settings_invalid(self, error: str) -> None:
        """Record that another setting failed validation (fatal)."""
        self._logger.critical(
            "settings_invalid",
            error=error,
            **self._get_context_kwargs(),
        )
