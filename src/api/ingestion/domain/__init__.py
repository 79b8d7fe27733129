"""Ingestion domain layer: value objects and domain exceptions."""

from ingestion.domain.exceptions import (
    REQUIRED_FIELDS,
    InvalidTelemetryError,
    PayloadTooLargeError,
)
from ingestion.domain.value_objects import (
    TelemetryMessage,
    TelemetryRecord,
    TelemetryUser,
)

__all__ = [
    "REQUIRED_FIELDS",
    "InvalidTelemetryError",
    "PayloadTooLargeError",
    "TelemetryMessage",
    "TelemetryRecord",
    "TelemetryUser",
]
