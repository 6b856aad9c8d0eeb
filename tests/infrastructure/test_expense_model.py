"""Expense table - verifies the PostgreSQL column types the migration and ORM agree on."""

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.schema import CreateTable

from expense_tracker.models.expense import Expense


def _ddl(dialect) -> str:
    return str(CreateTable(Expense.__table__).compile(dialect=dialect))


def test_postgres_id_is_bigserial():
    assert "BIGSERIAL" in _ddl(postgresql.dialect())


def test_postgres_text_columns_are_unbounded():
    ddl = _ddl(postgresql.dialect())
    assert "VARCHAR" not in ddl
    assert "title TEXT" in ddl
    assert "category TEXT" in ddl


def test_sqlite_id_stays_integer():
    assert "id INTEGER NOT NULL" in _ddl(sqlite.dialect())
