"""create todo tasks table"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1d2e7a9b40"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "todo_tasks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("expiry_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completion_percentage", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("length(title) > 0", name="ck_todo_tasks_title_length"),
        sa.CheckConstraint(
            "completion_percentage >= 0 AND completion_percentage <= 100",
            name="ck_todo_tasks_completion_percentage_range",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_todo_tasks"),
    )
    op.create_index("ix_todo_tasks_expiry_at", "todo_tasks", ["expiry_at"], unique=False)
    op.create_index("ix_todo_tasks_created_at", "todo_tasks", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_todo_tasks_created_at", table_name="todo_tasks")
    op.drop_index("ix_todo_tasks_expiry_at", table_name="todo_tasks")
    op.drop_table("todo_tasks")
