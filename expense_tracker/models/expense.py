"""Expense ORM - the single persisted entity.

Invariants:
    - id is an autoincrement 64-bit integer primary key, assigned on insert, never changed
    - title/description/category are unbounded Text, default ""
    - amount has no range constraint (negative and zero accepted)
    - date is nullable and stored as UTC

Design Decisions:
    - amount is Float and round-trips as a JSON number
    - No relationships: flat single-table schema
"""

from datetime import datetime

from sqlalchemy import BigInteger, Text, Float, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from expense_tracker.db.base import Base

# SQLite only autoincrements INTEGER PRIMARY KEY (already 64-bit there)
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


class Expense(Base):
    """One financial transaction record."""
    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(
        ID_TYPE, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    category: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    amount: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Expense id={self.id} title={self.title!r} amount={self.amount}>"
