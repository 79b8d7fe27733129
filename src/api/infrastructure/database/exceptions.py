"""Database-specific exceptions shared across bounded contexts."""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class DatabaseConfigurationError(DatabaseError):
    """Raised when the database URL cannot be turned into an engine."""

    pass


class PersistenceError(DatabaseError):
    """Raised when a store operation fails during a unit of work.

    The transaction has already been rolled back when this is raised.
    The original driver error is chained as ``__cause__``.
    """

    pass
