"""Root conftest - shared fixtures: in-memory DB, store, HTTP client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app's get_store dependency is overridden with a store bound to that database
    - app.state.db_manager points at the test database for readiness probes

Design Decisions:
    - SQLite in-memory via aiosqlite
    - StaticPool: every session shares the one in-memory connection
    - ASGITransport does not run the lifespan, so no real database is touched
"""

import os

# Settings are read when expense_tracker.main is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from expense_tracker.db.base import Base  # noqa: E402
import expense_tracker.models  # noqa: E402,F401
from expense_tracker.infrastructure.database import DatabaseSessionManager  # noqa: E402
from expense_tracker.infrastructure.expense_store import ExpenseStore, get_store  # noqa: E402
from expense_tracker.main import app  # noqa: E402


def _memory_engine():
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )


@pytest.fixture
async def test_engine():
    engine = _memory_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def store(db_manager):
    return ExpenseStore(db_manager)


@pytest.fixture
async def broken_store():
    """Store whose database has no expenses table - every query fails."""
    engine = _memory_engine()
    yield ExpenseStore(DatabaseSessionManager.from_engine(engine))
    await engine.dispose()


async def _client_for(store, db_manager, monkeypatch):
    app.dependency_overrides[get_store] = lambda: store
    monkeypatch.setattr(app.state, "db_manager", db_manager, raising=False)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(store, db_manager, monkeypatch):
    """FastAPI test client with the store dependency overridden."""
    async with await _client_for(store, db_manager, monkeypatch) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def broken_client(broken_store, monkeypatch):
    """Client whose store fails on every storage call."""
    async with await _client_for(broken_store, None, monkeypatch) as c:
        yield c
    app.dependency_overrides.clear()
