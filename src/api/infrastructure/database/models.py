"""SQLAlchemy declarative base shared by all ORM models.

Table definitions live in the bounded context that owns them. The service
never creates tables at runtime; the schema is provisioned out of band.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models.

    All models in the application should inherit from this base class.
    It provides the declarative base functionality and type hints for SQLAlchemy 2.0.
    """
