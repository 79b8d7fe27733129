"""Ingestion application layer."""

from ingestion.application.observability import (
    DefaultIngestionServiceProbe,
    IngestionServiceProbe,
)
from ingestion.application.services import IngestionService

__all__ = [
    "DefaultIngestionServiceProbe",
    "IngestionService",
    "IngestionServiceProbe",
]
