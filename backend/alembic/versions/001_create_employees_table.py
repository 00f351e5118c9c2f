"""Create employees table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `employees` table backing employee_api.models.employee.
How:   Portable column types only, so the same revision runs on SQLite and
       PostgreSQL.

Rollback: downgrade() drops the table (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "name",
            sa.String(255),
            nullable=False,
            comment="Display name; lookup key, duplicates allowed",
        ),
        # Not unique on purpose; the service checks email before saving
        sa.Column(
            "email",
            sa.String(255),
            nullable=True,
            comment="Contact email; uniqueness enforced by the service, not the table",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this record was inserted (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_employees_name", "employees", ["name"])
    op.create_index("idx_employees_email", "employees", ["email"])


def downgrade() -> None:
    op.drop_index("idx_employees_email", table_name="employees")
    op.drop_index("idx_employees_name", table_name="employees")
    op.drop_table("employees")
