"""Create products table.

Revision ID: 001_create_products
Revises: None
Create Date: 2026-10-15

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_products"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column(
            "availability", sa.Boolean, nullable=False,
            server_default=sa.true(),
        ),
        sa.CheckConstraint("price > 0", name="ck_products_price_positive"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("products")
