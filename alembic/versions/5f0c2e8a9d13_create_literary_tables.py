"""create literary creator and work tables

Revision ID: 5f0c2e8a9d13
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5f0c2e8a9d13"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "literary_creators",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("biography", sa.String(2000), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "literary_works",
        sa.Column("work_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("work_title", sa.String(500), nullable=False),
        sa.Column("international_code", sa.String(255), nullable=True),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["creator_id"], ["literary_creators.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("work_id"),
        sa.UniqueConstraint("international_code", name="uq_literary_works_international_code"),
    )
    op.create_index("ix_literary_works_creator_id", "literary_works", ["creator_id"])


def downgrade() -> None:
    op.drop_index("ix_literary_works_creator_id", table_name="literary_works")
    op.drop_table("literary_works")
    op.drop_table("literary_creators")
