"""Ports (interfaces) for the ingestion bounded context.

Ports define the contracts for repositories without specifying
implementation details, keeping the application layer independent of
SQLAlchemy.
"""

from ingestion.ports.repositories import ITelemetryRepository

__all__ = ["ITelemetryRepository"]
