"""news freshness flag

Revision ID: 0004_freshness
Revises: 0003_availability
Create Date: 2025-03-04 09:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = "0004_freshness"
down_revision = "0003_availability"
branch_labels = None
depends_on = None

TABLES = ("curated_links", "announcements", "blog_posts")


def upgrade() -> None:
    for table in TABLES:
        op.add_column(table, sa.Column("is_fresh", sa.Boolean(), nullable=False, server_default=sa.false()))


def downgrade() -> None:
    for table in TABLES:
        op.drop_column(table, "is_fresh")
