"""Persistence gateway over the shared async connection pool.

The gateway is the only component that touches the engine directly. Bounded
contexts hand it a unit of work and receive the transactional connection.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeVar

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from infrastructure.database.engines import create_engine, describe_tls
from infrastructure.observability.probes import DatabaseProbe, DefaultDatabaseProbe

if TYPE_CHECKING:
    from infrastructure.settings import DatabaseSettings

T = TypeVar("T")

UnitOfWork = Callable[[AsyncConnection], Awaitable[T]]


class PersistenceGateway:
    """Owns the connection pool and runs units of work in transactions.

    Safe to share across concurrent requests: every call checks out its own
    connection from the engine's pool and returns it on exit.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        probe: DatabaseProbe | None = None,
    ):
        """Initialize the gateway.

        Args:
            engine: Async engine owning the connection pool
            probe: Optional observability probe
        """
        self._engine = engine
        self._probe = probe or DefaultDatabaseProbe()

    @classmethod
    def from_settings(
        cls,
        settings: DatabaseSettings,
        probe: DatabaseProbe | None = None,
    ) -> PersistenceGateway:
        """Create a gateway with a new engine built from settings.

        No connection is opened until the first request needs one.
        """
        probe = probe or DefaultDatabaseProbe()
        engine = create_engine(settings)
        probe.engine_created(
            url=settings.redacted_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            tls=describe_tls(settings),
        )
        return cls(engine, probe=probe)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def ping(self) -> bool:
        """Run a trivial query to verify the store is reachable.

        Returns:
            True when ``SELECT 1`` succeeds, False on any failure.
        """
        try:
            async with self._engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
        except Exception as e:
            self._probe.ping_failed(e)
            return False
        return True

    async def run_in_transaction(self, work: UnitOfWork[T]) -> T:
        """Run ``work`` inside a single transaction.

        Commits when ``work`` returns. If ``work`` (or the commit) raises, the
        transaction is explicitly rolled back and the original exception is
        re-raised. A failing rollback is recorded but never replaces the
        original exception.

        Args:
            work: Coroutine function receiving the transactional connection

        Returns:
            Whatever ``work`` returned.
        """
        async with self._engine.connect() as connection:
            await connection.begin()
            try:
                result = await work(connection)
                await connection.commit()
            except Exception as error:
                await self._rollback(connection, error)
                raise

        self._probe.transaction_committed()
        return result

    async def _rollback(self, connection: AsyncConnection, original: Exception) -> None:
        try:
            await connection.rollback()
        except Exception as rollback_error:
            self._probe.rollback_failed(rollback_error, original)
        else:
            self._probe.transaction_rolled_back(original)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()
        self._probe.pool_disposed()
