"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DatabaseProbe(Protocol):
    """Domain probe for persistence gateway observability.

    This probe captures domain-significant events related to the database
    pool and transactions without exposing logging implementation details.
    """

    def engine_created(
        self, url: str, pool_size: int, max_overflow: int, tls: str
    ) -> None:
        """Record that the async engine (connection pool) was created."""
        ...

    def ping_failed(self, error: Exception) -> None:
        """Record that the liveness query failed."""
        ...

    def transaction_committed(self) -> None:
        """Record that a unit of work committed."""
        ...

    def transaction_rolled_back(self, error: Exception) -> None:
        """Record that a unit of work failed and was rolled back."""
        ...

    def rollback_failed(self, error: Exception, original: Exception) -> None:
        """Record that the explicit rollback itself failed."""
        ...

    def pool_disposed(self) -> None:
        """Record that the connection pool was closed."""
        ...

    def with_context(self, context: ObservationContext) -> DatabaseProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDatabaseProbe:
    """Default implementation of DatabaseProbe using structlog.

    Supports observation context for including request-scoped metadata
    with all log events.
    """

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

    def with_context(self, context: ObservationContext) -> DefaultDatabaseProbe:
        """Create a new probe with observation context bound."""
        return DefaultDatabaseProbe(logger=self._logger, context=context)

    def engine_created(
        self, url: str, pool_size: int, max_overflow: int, tls: str
    ) -> None:
        """Record that the async engine (connection pool) was created."""
        self._logger.info(
            "database_engine_created",
            url=url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            tls=tls,
            **self._get_context_kwargs(),
        )

    def ping_failed(self, error: Exception) -> None:
        """Record that the liveness query failed."""
        self._logger.error(
            "database_ping_failed",
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def transaction_committed(self) -> None:
        """Record that a unit of work committed."""
        self._logger.debug(
            "database_transaction_committed",
            **self._get_context_kwargs(),
        )

    def transaction_rolled_back(self, error: Exception) -> None:
        """Record that a unit of work failed and was rolled back."""
        self._logger.warning(
            "database_transaction_rolled_back",
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def rollback_failed(self, error: Exception, original: Exception) -> None:
        """Record that the explicit rollback itself failed."""
        self._logger.error(
            "database_rollback_failed",
            error=str(error),
            original_error=str(original),
            **self._get_context_kwargs(),
        )

    def pool_disposed(self) -> None:
        """Record that the connection pool was closed."""
        self._logger.info(
            "database_pool_disposed",
            **self._get_context_kwargs(),
        )
