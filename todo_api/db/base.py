"""SQLAlchemy Declarative Base — shared base class for ORM models.

Invariants:
    - Base.metadata is the single source of truth for table definitions
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all todo API ORM models."""
    pass
