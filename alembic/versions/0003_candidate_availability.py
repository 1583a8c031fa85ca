"""candidate availability status

Revision ID: 0003_availability
Revises: 0002_vocabulary
Create Date: 2025-02-17 12:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = "0003_availability"
down_revision = "0002_vocabulary"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column("candidates", sa.Column("availability", sa.Text(), server_default="looking"))
    # Carry the old boolean over; unavailable candidates become not-looking
    op.execute("UPDATE candidates SET availability = 'not-looking' WHERE available = false")
    op.create_index("candidates_availability_idx", "candidates", ["availability"])


def downgrade() -> None:
    op.drop_index("candidates_availability_idx", table_name="candidates")
    op.drop_column("candidates", "availability")
