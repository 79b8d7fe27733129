"""Ingestion application service.

Orchestrates one telemetry submission: the user upsert and the message
insert run as a single unit of work through the persistence gateway.
"""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncConnection

from infrastructure.database.exceptions import PersistenceError
from infrastructure.database.gateway import PersistenceGateway
from ingestion.application.observability import (
    DefaultIngestionServiceProbe,
    IngestionServiceProbe,
)
from ingestion.domain.value_objects import TelemetryRecord
from ingestion.ports.repositories import ITelemetryRepository

RepositoryFactory = Callable[[AsyncConnection], ITelemetryRepository]


class IngestionService:
    """Application service for telemetry ingestion."""

    def __init__(
        self,
        gateway: PersistenceGateway,
        repository_factory: RepositoryFactory,
        probe: IngestionServiceProbe | None = None,
    ):
        """Initialize IngestionService with dependencies.

        Args:
            gateway: Persistence gateway owning transactions
            repository_factory: Builds a repository bound to a transactional connection
            probe: Optional domain probe for observability
        """
        self._gateway = gateway
        self._repository_factory = repository_factory
        self._probe = probe or DefaultIngestionServiceProbe()

    async def ingest(self, record: TelemetryRecord) -> None:
        """Upsert the user, then append the message, atomically.

        The user statement runs first so the message's foreign key is always
        satisfied. Either both rows become visible or neither does.

        Args:
            record: Validated telemetry submission

        Raises:
            PersistenceError: If either statement or the commit fails. The
                transaction has been rolled back by then.
        """

        async def unit_of_work(connection: AsyncConnection) -> None:
            repository = self._repository_factory(connection)
            await repository.upsert_user(record.user)
            await repository.append_message(record.message)

        try:
            await self._gateway.run_in_transaction(unit_of_work)
        except Exception as e:
            self._probe.ingestion_failed(user_id=record.user.user_id, error=e)
            raise PersistenceError("Failed to persist telemetry") from e

        self._probe.telemetry_ingested(
            user_id=record.user.user_id,
            has_display_name=record.user.display_name is not None,
        )
