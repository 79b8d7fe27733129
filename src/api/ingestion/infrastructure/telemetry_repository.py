"""PostgreSQL implementation of ITelemetryRepository."""

from __future__ import annotations

from sqlalchemy import func, insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncConnection

from ingestion.domain.value_objects import TelemetryMessage, TelemetryUser
from ingestion.infrastructure.models import MessageModel, UserModel
from ingestion.infrastructure.observability import (
    DefaultTelemetryRepositoryProbe,
    TelemetryRepositoryProbe,
)
from ingestion.ports.repositories import ITelemetryRepository


class TelemetryRepository(ITelemetryRepository):
    """Writes users and messages on a transactional connection.

    The connection belongs to the caller's transaction; this class never
    commits or rolls back.
    """

    def __init__(
        self,
        connection: AsyncConnection,
        probe: TelemetryRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with a transactional connection and probe.

        Args:
            connection: Connection with an open transaction
            probe: Optional domain probe for observability
        """
        self._connection = connection
        self._probe = probe or DefaultTelemetryRepositoryProbe()

    async def upsert_user(self, user: TelemetryUser) -> None:
        """Insert the user or overwrite username and display name on conflict."""
        stmt = pg_insert(UserModel).values(
            id=user.user_id,
            username=user.username,
            display_name=user.display_name,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[UserModel.id],
            set_={
                "username": stmt.excluded.username,
                "display_name": stmt.excluded.display_name,
            },
        )
        await self._connection.execute(stmt)
        self._probe.user_upserted(user.user_id)

    async def append_message(self, message: TelemetryMessage) -> None:
        """Insert a message with ts = now() of the current transaction."""
        stmt = insert(MessageModel).values(
            user_id=message.user_id,
            message=message.text,
            ts=func.now(),
        )
        await self._connection.execute(stmt)
        self._probe.message_appended(message.user_id)
