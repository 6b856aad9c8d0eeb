"""Initial schema - expenses table.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "expenses",
        sa.Column(
            "id", sa.BigInteger().with_variant(sa.Integer, "sqlite"),
            primary_key=True, autoincrement=True,
        ),
        sa.Column("title", sa.Text, nullable=False, server_default=""),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("category", sa.Text, nullable=False, server_default=""),
        sa.Column("amount", sa.Float, nullable=False, server_default="0"),
        sa.Column("date", sa.DateTime(timezone=True), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("expenses")
