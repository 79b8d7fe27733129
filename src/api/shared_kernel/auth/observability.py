"""Domain probe for access control decisions.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to bearer token checks and the client
IP allowlist.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AccessControlProbe(Protocol):
    """Domain probe for access control operations."""

    def token_rejected(self, reason: str) -> None:
        """Record that a request was rejected by the bearer token check."""
        ...

    def client_address_denied(self, address: str) -> None:
        """Record that a client address was not on the allowlist."""
        ...

    def with_context(self, context: ObservationContext) -> AccessControlProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAccessControlProbe:
    """Default implementation of AccessControlProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAccessControlProbe:
        """Create a new probe with observation context bound."""
        return DefaultAccessControlProbe(logger=self._logger, context=context)

    def token_rejected(self, reason: str) -> None:
        """Record that a request was rejected by the bearer token check."""
        self._logger.warning(
            "bearer_token_rejected",
            reason=reason,
            **self._get_context_kwargs(),
        )

    def client_address_denied(self, address: str) -> None:
        """Record that a client address was not on the allowlist."""
        self._logger.warning(
            "client_address_denied",
            address=address,
            **self._get_context_kwargs(),
        )
