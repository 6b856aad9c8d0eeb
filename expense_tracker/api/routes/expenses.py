"""Expense Routes - the five CRUD endpoints over the expense store.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - Handlers hold no state; the store is injected per request via get_store
    - Unknown ids surface as ResourceNotFoundError (404) from the store,
      storage failures as PersistenceError (500); both handled globally

Design Decisions:
    - Routes depend on the ExpenseRepository protocol, not on SQLAlchemy
    - PUT is a merge: only fields present in the body are written
"""

import logging

from fastapi import APIRouter, Depends, status

from expense_tracker.core.domain_types import ExpenseId
from expense_tracker.core.repository_protocols import ExpenseRepository
from expense_tracker.infrastructure.expense_store import get_store
from expense_tracker.schemas.expense import (
    ExpenseCreate, ExpenseResponse, ExpenseUpdate, MessageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post(
    "", response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_expense(
    body: ExpenseCreate, store: ExpenseRepository = Depends(get_store),
):
    """Create an expense; the id is assigned by the store."""
    return await store.insert(body.model_dump())


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(store: ExpenseRepository = Depends(get_store)):
    """List every stored expense."""
    return await store.find_all()


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: int, store: ExpenseRepository = Depends(get_store),
):
    return await store.find_by_id(ExpenseId(expense_id))


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: int,
    body: ExpenseUpdate,
    store: ExpenseRepository = Depends(get_store),
):
    """Merge the supplied fields into the stored expense."""
    return await store.update(ExpenseId(expense_id), body.changes())


@router.delete("/{expense_id}", response_model=MessageResponse)
async def delete_expense(
    expense_id: int, store: ExpenseRepository = Depends(get_store),
):
    await store.delete(ExpenseId(expense_id))
    return MessageResponse(message="Expense deleted")
