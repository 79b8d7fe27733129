"""Ingestion infrastructure: ORM models and the PostgreSQL repository."""

from ingestion.infrastructure.models import MessageModel, UserModel
from ingestion.infrastructure.observability import (
    DefaultTelemetryRepositoryProbe,
    TelemetryRepositoryProbe,
)
from ingestion.infrastructure.telemetry_repository import TelemetryRepository

__all__ = [
    "DefaultTelemetryRepositoryProbe",
    "MessageModel",
    "TelemetryRepository",
    "TelemetryRepositoryProbe",
    "UserModel",
]
