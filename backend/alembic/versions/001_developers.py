"""Developers table — explicit column list, integer PK, lookup indexes.

Revision ID: 001_developers
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_developers"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "developers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("specialty", sa.String(255), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="ACTIVE"),
    )
    # email is NOT unique: updates may reuse an existing email
    op.create_index("ix_developers_email", "developers", ["email"])
    op.create_index("ix_developers_specialty", "developers", ["specialty"])


def downgrade() -> None:
    op.drop_index("ix_developers_specialty", table_name="developers")
    op.drop_index("ix_developers_email", table_name="developers")
    op.drop_table("developers")
