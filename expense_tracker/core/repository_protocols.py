"""Boundary Protocols - contracts between the API layer and persistence.

Invariants:
    - Routes depend on ExpenseRepository, never on SQLAlchemy directly
    - Implementation provided by infrastructure via dependency injection
    - Missing ids raise ResourceNotFoundError; storage failures raise PersistenceError

Design Decisions:
    - Protocol, not ABC: ExpenseStore satisfies it structurally
    - update() takes a field-name -> value mapping: an explicit "" or 0.0
      is a new value, an absent key means no change
"""

from typing import Any, Protocol, Sequence

from expense_tracker.core.domain_types import ExpenseId


class ExpenseLike(Protocol):
    """Structural contract for Expense objects returned by the repository."""
    id: int
    title: str
    description: str
    category: str
    amount: float
    date: Any


class ExpenseRepository(Protocol):
    """Contract for expense persistence - implemented by infrastructure."""
    async def insert(self, data: dict[str, Any]) -> ExpenseLike: ...
    async def find_all(self) -> Sequence[ExpenseLike]: ...
    async def find_by_id(self, expense_id: ExpenseId) -> ExpenseLike: ...
    async def update(
        self, expense_id: ExpenseId, changes: dict[str, Any],
    ) -> ExpenseLike: ...
    async def delete(self, expense_id: ExpenseId) -> None: ...
