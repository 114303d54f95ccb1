"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models and the paper_authors table register on Base.metadata
    - Base is the single source of truth for table metadata (alembic + test fixtures)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all catalog ORM models."""
    pass
