"""Expense Store - CRUD persistence for the expenses table.

Invariants:
    - Every operation runs in its own session; storage failures propagate as PersistenceError
    - find_by_id/update/delete raise ResourceNotFoundError for unknown ids,
      including ids outside the 64-bit column range
    - update() applies only the keys present in `changes`, then re-reads the row
      after commit, so the caller sees what storage holds
    - Exactly one date-default policy per store instance

Design Decisions:
    - Explicitly constructed and injected via app.state + get_store dependency,
      replacing a process-wide DB handle
    - update() returns the row re-read after commit, not the in-memory merge;
      a concurrent write landing before the refresh is what the caller sees
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from expense_tracker.core.domain_types import DateDefault, ExpenseId
from expense_tracker.core.errors import ResourceNotFoundError
from expense_tracker.infrastructure.database import DatabaseSessionManager
from expense_tracker.models.expense import Expense

logger = logging.getLogger(__name__)

# signed 64-bit, the range of the id column
MIN_EXPENSE_ID = -(2**63)
MAX_EXPENSE_ID = 2**63 - 1


class ExpenseStore:
    """SQLAlchemy-backed ExpenseRepository."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        date_default: DateDefault = DateDefault.UNSET,
    ):
        self._db = db
        self._date_default = date_default

    async def insert(self, data: dict[str, Any]) -> Expense:
        fields = {k: v for k, v in data.items() if k != "id"}
        if fields.get("date") is None and self._date_default is DateDefault.NOW:
            fields["date"] = datetime.now(timezone.utc)
        async with self._db.session() as db:
            expense = Expense(**fields)
            db.add(expense)
            await db.commit()
            await db.refresh(expense)
        logger.info(
            f"Expense {expense.id} created", extra={"expense_id": expense.id},
        )
        return expense

    async def find_all(self) -> list[Expense]:
        async with self._db.session() as db:
            result = await db.execute(select(Expense).order_by(Expense.id))
            return list(result.scalars().all())

    async def find_by_id(self, expense_id: ExpenseId) -> Expense:
        async with self._db.session() as db:
            return await _get_or_raise(db, expense_id)

    async def update(
        self, expense_id: ExpenseId, changes: dict[str, Any],
    ) -> Expense:
        async with self._db.session() as db:
            expense = await _get_or_raise(db, expense_id)
            for field, value in changes.items():
                if field == "id":
                    continue
                setattr(expense, field, value)
            await db.commit()
            await db.refresh(expense)
        logger.info(
            f"Expense {expense_id} updated ({', '.join(sorted(changes)) or 'no fields'})",
            extra={"expense_id": expense_id},
        )
        return expense

    async def delete(self, expense_id: ExpenseId) -> None:
        async with self._db.session() as db:
            expense = await _get_or_raise(db, expense_id)
            await db.delete(expense)
            await db.commit()
        logger.info(
            f"Expense {expense_id} deleted", extra={"expense_id": expense_id},
        )


async def _get_or_raise(db: AsyncSession, expense_id: ExpenseId) -> Expense:
    if not MIN_EXPENSE_ID <= expense_id <= MAX_EXPENSE_ID:
        # cannot exist in the column
        raise ResourceNotFoundError("Expense", expense_id)
    expense = await db.get(Expense, expense_id)
    if expense is None:
        raise ResourceNotFoundError("Expense", expense_id)
    return expense


def get_store(request: Request) -> ExpenseStore:
    """FastAPI dependency for the store built during app startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Expense store not initialized")
    return store
