"""transformations

Revision ID: 0001_transformations
Revises: 
Create Date: 2026-10-19

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_transformations"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "transformations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("original_text", sa.Text(), nullable=False),
        sa.Column("transformed_text", sa.Text(), nullable=False),
        sa.Column("tone", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_transformations_created_at", "transformations", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_transformations_created_at", table_name="transformations")
    op.drop_table("transformations")
