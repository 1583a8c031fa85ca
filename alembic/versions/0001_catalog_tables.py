"""catalog tables: jobs, candidates, news, portfolio

Revision ID: 0001_catalog
Revises:
Create Date: 2025-01-20 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_catalog"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "jobs",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("company", sa.Text(), nullable=False),
        sa.Column("company_logo", sa.Text(), nullable=True),
        sa.Column("link", sa.Text(), nullable=False),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("remote", sa.Text(), nullable=True),
        sa.Column("type", sa.Text(), nullable=True),
        sa.Column("salary", sa.Text(), nullable=True),
        sa.Column("department", sa.Text(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("featured", sa.Boolean(), server_default=sa.false()),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("responsibilities", sa.JSON(), nullable=True),
        sa.Column("qualifications", sa.JSON(), nullable=True),
        sa.Column("benefits", sa.JSON(), nullable=True),
        sa.Column("company_website", sa.Text(), nullable=True),
        sa.Column("company_x", sa.Text(), nullable=True),
        sa.Column("company_github", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("jobs_company_idx", "jobs", ["company"])
    op.create_index("jobs_category_idx", "jobs", ["category"])
    op.create_index("jobs_featured_idx", "jobs", ["featured"])

    op.create_table(
        "candidates",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("skills", sa.JSON(), nullable=True),
        sa.Column("experience", sa.Text(), nullable=True),
        sa.Column("education", sa.Text(), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("cv", sa.Text(), nullable=True),
        sa.Column("featured", sa.Boolean(), server_default=sa.false()),
        sa.Column("available", sa.Boolean(), server_default=sa.true()),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("telegram", sa.Text(), nullable=True),
        sa.Column("calendly", sa.Text(), nullable=True),
        sa.Column("x", sa.Text(), nullable=True),
        sa.Column("github", sa.Text(), nullable=True),
        sa.Column("linkedin", sa.Text(), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("candidates_featured_idx", "candidates", ["featured"])
    op.create_index("candidates_available_idx", "candidates", ["available"])

    op.create_table(
        "curated_links",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("source", sa.Text(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("featured", sa.Boolean(), server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("curated_links_category_idx", "curated_links", ["category"])
    op.create_index("curated_links_date_idx", "curated_links", ["date"])

    op.create_table(
        "announcements",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("company", sa.Text(), nullable=False),
        sa.Column("company_logo", sa.Text(), nullable=True),
        sa.Column("platform", sa.Text(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("featured", sa.Boolean(), server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("announcements_company_idx", "announcements", ["company"])
    op.create_index("announcements_date_idx", "announcements", ["date"])

    op.create_table(
        "investments",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("logo", sa.Text(), nullable=True),
        sa.Column("tier", sa.Text(), nullable=True),
        sa.Column("featured", sa.Boolean(), server_default=sa.false()),
        sa.Column("status", sa.Text(), server_default="active"),
        sa.Column("categories", sa.JSON(), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("x", sa.Text(), nullable=True),
        sa.Column("github", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("investments_tier_idx", "investments", ["tier"])
    op.create_index("investments_featured_idx", "investments", ["featured"])

    op.create_table(
        "affiliations",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.Column("date_begin", sa.Text(), nullable=True),
        sa.Column("date_end", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("logo", sa.Text(), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("affiliations_title_idx", "affiliations", ["title"])


def downgrade() -> None:
    for table in ("affiliations", "investments", "announcements", "curated_links", "candidates", "jobs"):
        op.drop_table(table)
