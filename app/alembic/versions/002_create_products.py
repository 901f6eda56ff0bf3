"""Create products table

Revision ID: 002_create_products
Revises: 001_create_users
Create Date: 2026-10-18

"""

from alembic import op
import sqlalchemy as sa


revision = "002_create_products"
down_revision = "001_create_users"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("products")
