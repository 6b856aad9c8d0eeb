"""ORM Models - SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata is populated for create_all and alembic
"""

from expense_tracker.models.expense import Expense  # noqa: F401
