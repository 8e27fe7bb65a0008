"""create partner promo code limits table

Revision ID: 002
Revises: 001
Create Date: 2025-02-10 10:30:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "partner_promo_code_limits",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("partner_id", sa.Uuid(), nullable=False),
        sa.Column("limit", sa.Integer(), nullable=False),
        sa.Column("create_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("cancel_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["partner_id"], ["partners.id"]),
        # CHECK constraint: a limit always allows at least one promo code
        sa.CheckConstraint(
            '"limit" > 0',
            name="ck_partner_promo_code_limits_limit_positive",
        ),
    )
    op.create_index(
        "ix_partner_promo_code_limits_partner_id",
        "partner_promo_code_limits",
        ["partner_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(
        "ix_partner_promo_code_limits_partner_id",
        table_name="partner_promo_code_limits",
    )
    op.drop_table("partner_promo_code_limits")
