"""vocabulary tables, api keys, blog posts

Revision ID: 0002_vocabulary
Revises: 0001_catalog
Create Date: 2025-02-03 12:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = "0002_vocabulary"
down_revision = "0001_catalog"
branch_labels = None
depends_on = None


def _lookup_table(name, with_color):
    columns = [
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("slug", sa.Text(), nullable=False, unique=True),
        sa.Column("label", sa.Text(), nullable=False),
    ]
    if with_color:
        columns.append(sa.Column("color", sa.Text(), nullable=True))
    columns.append(sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()))
    op.create_table(name, *columns)
    op.create_index(f"ix_{name}_slug", name, ["slug"])


def upgrade() -> None:
    _lookup_table("job_tags", with_color=True)
    _lookup_table("job_roles", with_color=False)
    _lookup_table("investment_categories", with_color=True)

    op.create_table(
        "api_keys",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("key", sa.Text(), nullable=False, unique=True),
        sa.Column("permissions", sa.JSON(), nullable=True),
        sa.Column("last_used_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_api_keys_key", "api_keys", ["key"])

    op.create_table(
        "blog_posts",
        sa.Column("slug", sa.String(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("source", sa.Text(), nullable=True),
        sa.Column("source_url", sa.Text(), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("published", sa.Boolean(), server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("blog_posts_date_idx", "blog_posts", ["date"])
    op.create_index("blog_posts_published_idx", "blog_posts", ["published"])


def downgrade() -> None:
    for table in ("blog_posts", "api_keys", "investment_categories", "job_roles", "job_tags"):
        op.drop_table(table)
