"""create_vehicle_table

Revision ID: b2c3d4e5f6a7
Revises: a1b2c3d4e5f6
Create Date: 2026-10-12

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "b2c3d4e5f6a7"
down_revision: Union[str, Sequence[str], None] = "a1b2c3d4e5f6"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create vehicle table. vehicle_type holds the enum name (CAR, MOTORCYCLE, ...)."""
    op.create_table(
        "vehicle",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("license", sa.String(length=32), nullable=False),
        sa.Column("vehicle_type", sa.String(length=16), nullable=False),
        sa.Column("apartment_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["apartment_id"], ["apartment.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("license"),
    )
    op.create_index("ix_vehicle_apartment_id", "vehicle", ["apartment_id"])


def downgrade() -> None:
    """Drop vehicle table."""
    op.drop_index("ix_vehicle_apartment_id", table_name="vehicle")
    op.drop_table("vehicle", if_exists=True)
