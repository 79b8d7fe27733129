"""Repository protocols (ports) for the ingestion bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ingestion.domain.value_objects import TelemetryMessage, TelemetryUser


@runtime_checkable
class ITelemetryRepository(Protocol):
    """Writes telemetry within a transaction owned by the caller.

    Implementations are bound to one transactional connection and never
    commit or roll back themselves.
    """

    async def upsert_user(self, user: TelemetryUser) -> None:
        """Insert the user, or overwrite username and display name if it exists.

        Args:
            user: Latest snapshot of the user (last write wins)
        """
        ...

    async def append_message(self, message: TelemetryMessage) -> None:
        """Insert a message stamped with the store's current time.

        The referenced user must already exist in the same transaction.

        Args:
            message: The message to append
        """
        ...
