"""SQLAlchemy Declarative Base - shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata

Design Decisions:
    - Base has no engine import; models and alembic import it directly
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Expense Tracker ORM models."""
    pass
