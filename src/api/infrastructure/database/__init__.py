"""Database infrastructure - shared connection primitives."""

from infrastructure.database.exceptions import (
    DatabaseConfigurationError,
    DatabaseError,
    PersistenceError,
)
from infrastructure.database.gateway import PersistenceGateway

__all__ = [
    "DatabaseConfigurationError",
    "DatabaseError",
    "PersistenceError",
    "PersistenceGateway",
]
