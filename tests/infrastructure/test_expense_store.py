"""Expense Store - verifies CRUD persistence against in-memory SQLite.

Tests:
    - insert assigns unique ids and ignores a caller id
    - find_all is empty on a fresh database and ordered by id
    - find_by_id / update / delete raise ResourceNotFoundError for unknown ids
    - update merges only the supplied fields and returns the stored row
    - delete is permanent
    - DateDefault.NOW stamps missing dates; UNSET leaves them null
    - storage failures surface as PersistenceError
"""

from datetime import datetime, timezone

import pytest

from expense_tracker.core.domain_types import DateDefault, ExpenseId
from expense_tracker.core.errors import PersistenceError, ResourceNotFoundError
from expense_tracker.infrastructure.expense_store import ExpenseStore


def _expense(**overrides):
    data = {
        "title": "Lunch", "description": "Noodles", "category": "Food",
        "amount": 10.0, "date": None,
    }
    data.update(overrides)
    return data


async def test_insert_assigns_unique_ids(store):
    first = await store.insert(_expense())
    second = await store.insert(_expense(title="Dinner"))
    assert first.id is not None
    assert second.id is not None
    assert first.id != second.id


async def test_insert_ignores_caller_id(store):
    created = await store.insert(_expense(id=999))
    assert created.id == 1
    fetched = await store.find_by_id(ExpenseId(created.id))
    assert fetched.title == "Lunch"


async def test_insert_accepts_negative_and_zero_amounts(store):
    refund = await store.insert(_expense(amount=-12.5))
    free = await store.insert(_expense(amount=0.0))
    assert refund.amount == -12.5
    assert free.amount == 0.0


async def test_find_all_empty(store):
    assert await store.find_all() == []


async def test_find_all_returns_every_row_in_id_order(store):
    ids = [(await store.insert(_expense(title=t))).id for t in ("a", "b", "c")]
    assert [e.id for e in await store.find_all()] == ids


async def test_find_by_id_roundtrip(store):
    created = await store.insert(_expense(date=datetime(2025, 1, 17, 23, 51, tzinfo=timezone.utc)))
    fetched = await store.find_by_id(ExpenseId(created.id))
    assert (fetched.title, fetched.description, fetched.category, fetched.amount) == (
        "Lunch", "Noodles", "Food", 10.0,
    )
    assert fetched.date.replace(tzinfo=timezone.utc) == datetime(
        2025, 1, 17, 23, 51, tzinfo=timezone.utc,
    )


async def test_find_by_id_unknown_raises_not_found(store):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await store.find_by_id(ExpenseId(12345))
    assert exc_info.value.resource_id == 12345


@pytest.mark.parametrize("expense_id", [2**63, -(2**63) - 1, 2**70])
async def test_ids_outside_64_bits_are_not_found(store, expense_id):
    with pytest.raises(ResourceNotFoundError):
        await store.find_by_id(ExpenseId(expense_id))
    with pytest.raises(ResourceNotFoundError):
        await store.update(ExpenseId(expense_id), {"title": "x"})
    with pytest.raises(ResourceNotFoundError):
        await store.delete(ExpenseId(expense_id))


async def test_update_merges_supplied_fields_only(store):
    created = await store.insert(_expense())
    updated = await store.update(ExpenseId(created.id), {"amount": 15.0})
    assert (updated.title, updated.amount, updated.category) == ("Lunch", 15.0, "Food")

    stored = await store.find_by_id(ExpenseId(created.id))
    assert (stored.title, stored.amount, stored.category) == ("Lunch", 15.0, "Food")


async def test_update_applies_explicit_empty_and_zero(store):
    created = await store.insert(_expense())
    updated = await store.update(
        ExpenseId(created.id), {"category": "", "amount": 0.0},
    )
    assert updated.category == ""
    assert updated.amount == 0.0
    assert updated.title == "Lunch"


async def test_update_never_changes_id(store):
    created = await store.insert(_expense())
    updated = await store.update(ExpenseId(created.id), {"id": 777, "title": "Brunch"})
    assert updated.id == created.id
    assert updated.title == "Brunch"


async def test_update_unknown_raises_not_found(store):
    with pytest.raises(ResourceNotFoundError):
        await store.update(ExpenseId(404), {"title": "x"})


async def test_delete_is_permanent(store):
    created = await store.insert(_expense())
    await store.delete(ExpenseId(created.id))
    with pytest.raises(ResourceNotFoundError):
        await store.find_by_id(ExpenseId(created.id))
    assert await store.find_all() == []


async def test_delete_unknown_raises_not_found(store):
    with pytest.raises(ResourceNotFoundError):
        await store.delete(ExpenseId(404))


async def test_unset_policy_leaves_date_null(store):
    created = await store.insert(_expense())
    assert created.date is None


async def test_now_policy_stamps_missing_date(db_manager):
    store = ExpenseStore(db_manager, date_default=DateDefault.NOW)
    before = datetime.now(timezone.utc).replace(microsecond=0)
    created = await store.insert(_expense())
    assert created.date is not None
    assert created.date.replace(tzinfo=timezone.utc) >= before


async def test_now_policy_keeps_supplied_date(db_manager):
    store = ExpenseStore(db_manager, date_default=DateDefault.NOW)
    supplied = datetime(2020, 5, 1, 9, 0, tzinfo=timezone.utc)
    created = await store.insert(_expense(date=supplied))
    assert created.date.replace(tzinfo=timezone.utc) == supplied


async def test_storage_failure_raises_persistence_error(broken_store):
    with pytest.raises(PersistenceError):
        await broken_store.insert(_expense())
    with pytest.raises(PersistenceError):
        await broken_store.find_all()
