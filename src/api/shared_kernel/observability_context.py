"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped metadata that should be included with all
    instrumentation events, so events from one request can be correlated.

    Attributes:
        request_id: Unique identifier for the current request.
        client_ip: Resolved client address of the caller (if known).
        telemetry_user_id: Identifier of the user a telemetry message is about.

    Example:
        context = ObservationContext(request_id="req-123", client_ip="10.0.0.5")
        probe = DefaultDatabaseProbe().with_context(context)
    """

    request_id: str | None = None
    client_ip: str | None = None
    telemetry_user_id: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.client_ip is not None:
            result["client_ip"] = self.client_ip
        if self.telemetry_user_id is not None:
            result["telemetry_user_id"] = self.telemetry_user_id
        return result

    def with_telemetry_user(self, telemetry_user_id: str) -> ObservationContext:
        """Create a new context with the telemetry user id set."""
        return replace(self, telemetry_user_id=telemetry_user_id)
