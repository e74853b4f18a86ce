"""Persistence model for ToDo tasks built with SQLModel."""

from __future__ import annotations

import uuid
from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 5000


class TodoTaskRecord(SQLModel, table=True):
    """Row shape of the ``todo_tasks`` table.

    The domain ``TodoTask`` is mapped to and from this record by the task
    repository; nothing outside the repository mutates records directly.
    """

    __tablename__ = "todo_tasks"
    __table_args__ = (
        sa.CheckConstraint("length(title) > 0", name="ck_todo_tasks_title_length"),
        sa.CheckConstraint(
            "completion_percentage >= 0 AND completion_percentage <= 100",
            name="ck_todo_tasks_completion_percentage_range",
        ),
        sa.Index("ix_todo_tasks_expiry_at", "expiry_at"),
        sa.Index("ix_todo_tasks_created_at", "created_at"),
    )

    id: uuid.UUID = Field(primary_key=True)
    title: str = Field(sa_column=sa.Column(sa.String(length=TITLE_MAX_LENGTH), nullable=False))
    description: str | None = Field(default=None, sa_column=sa.Column(sa.Text(), nullable=True))
    expiry_at: datetime = Field(sa_column=sa.Column(sa.DateTime(timezone=True), nullable=False))
    completion_percentage: int = Field(
        default=0,
        sa_column=sa.Column(sa.Integer(), nullable=False, server_default="0"),
    )
    created_at: datetime = Field(sa_column=sa.Column(sa.DateTime(timezone=True), nullable=False))
    updated_at: datetime | None = Field(
        default=None,
        sa_column=sa.Column(sa.DateTime(timezone=True), nullable=True),
    )


__all__ = ["DESCRIPTION_MAX_LENGTH", "TITLE_MAX_LENGTH", "TodoTaskRecord"]
