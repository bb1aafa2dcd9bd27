"""initial schema: reference tables, tasks, association sets, activity log, comments

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-19

app_user, status and label are reference rows owned by other services.
task_activity_log is append-only; (created_at, sequence) orders entries, with
sequence an autoincrementing insertion counter across the whole table.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c2e3f4b5d6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_PRIORITY = sa.Enum("LOW", "MEDIUM", "HIGH", "CRITICAL", name="task_priority")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def _user_audit() -> list[sa.Column]:
    return [
        sa.Column("created_by", sa.String(length=64), nullable=True),
        sa.Column("updated_by", sa.String(length=64), nullable=True),
        sa.Column("deleted_by", sa.String(length=64), nullable=True),
    ]


def _user_audit_fks() -> list[sa.ForeignKeyConstraint]:
    return [
        sa.ForeignKeyConstraint(["created_by"], ["app_user.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["updated_by"], ["app_user.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["deleted_by"], ["app_user.id"], ondelete="SET NULL"),
    ]


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_app_user_email"),
    )
    op.create_index("ix_app_user_deleted_at", "app_user", ["deleted_at"], unique=False)

    op.create_table(
        "status",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_status_deleted_at", "status", ["deleted_at"], unique=False)

    op.create_table(
        "label",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("color", sa.String(length=32), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_label_deleted_at", "label", ["deleted_at"], unique=False)

    op.create_table(
        "task",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("parent_task_id", sa.String(length=64), nullable=True),
        sa.Column("assignor_id", sa.String(length=64), nullable=False),
        sa.Column("current_status_id", sa.String(length=64), nullable=True),
        sa.Column("priority", _PRIORITY, nullable=True),
        sa.Column("predicted_finish_date", sa.Date(), nullable=True),
        *_timestamps(),
        *_user_audit(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["parent_task_id"], ["task.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["assignor_id"], ["app_user.id"]),
        sa.ForeignKeyConstraint(
            ["current_status_id"], ["status.id"], ondelete="SET NULL"
        ),
        *_user_audit_fks(),
    )
    op.create_index("ix_task_parent_task_id", "task", ["parent_task_id"], unique=False)
    op.create_index("ix_task_assignor_id", "task", ["assignor_id"], unique=False)
    op.create_index("ix_task_created_by", "task", ["created_by"], unique=False)
    op.create_index("ix_task_deleted_at", "task", ["deleted_at"], unique=False)

    op.create_table(
        "task_assignee",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("task_id", sa.String(length=64), nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["task_id"], ["task.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("task_id", "user_id", name="uq_task_assignee"),
    )
    op.create_index("ix_task_assignee_user", "task_assignee", ["user_id"], unique=False)

    op.create_table(
        "task_status",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("task_id", sa.String(length=64), nullable=False),
        sa.Column("status_id", sa.String(length=64), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["task_id"], ["task.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["status_id"], ["status.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("task_id", "status_id", name="uq_task_status"),
    )

    op.create_table(
        "task_label",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("task_id", sa.String(length=64), nullable=False),
        sa.Column("label_id", sa.String(length=64), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["task_id"], ["task.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["label_id"], ["label.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("task_id", "label_id", name="uq_task_label"),
    )

    op.create_table(
        "task_activity_log",
        sa.Column("sequence", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("task_id", sa.String(length=64), nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("action", sa.String(length=32), nullable=False),
        sa.Column("field", sa.String(length=64), nullable=True),
        sa.Column("old_value", sa.Text(), nullable=True),
        sa.Column("new_value", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("sequence"),
        sa.UniqueConstraint("id", name="uq_task_activity_log_id"),
        sa.ForeignKeyConstraint(["task_id"], ["task.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"]),
    )
    op.create_index(
        "ix_task_activity_log_task_created",
        "task_activity_log",
        ["task_id", "created_at"],
        unique=False,
    )
    op.create_index(
        "ix_task_activity_log_created", "task_activity_log", ["created_at"], unique=False
    )
    op.create_index(
        "ix_task_activity_log_user_id", "task_activity_log", ["user_id"], unique=False
    )

    op.create_table(
        "comment",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("task_id", sa.String(length=64), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        *_user_audit(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["task_id"], ["task.id"], ondelete="CASCADE"),
        *_user_audit_fks(),
    )
    op.create_index(
        "ix_comment_task_created", "comment", ["task_id", "created_at"], unique=False
    )
    op.create_index("ix_comment_created_by", "comment", ["created_by"], unique=False)
    op.create_index("ix_comment_deleted_at", "comment", ["deleted_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_comment_deleted_at", table_name="comment")
    op.drop_index("ix_comment_created_by", table_name="comment")
    op.drop_index("ix_comment_task_created", table_name="comment")
    op.drop_table("comment")
    op.drop_index("ix_task_activity_log_user_id", table_name="task_activity_log")
    op.drop_index("ix_task_activity_log_created", table_name="task_activity_log")
    op.drop_index("ix_task_activity_log_task_created", table_name="task_activity_log")
    op.drop_table("task_activity_log")
    op.drop_table("task_label")
    op.drop_table("task_status")
    op.drop_index("ix_task_assignee_user", table_name="task_assignee")
    op.drop_table("task_assignee")
    op.drop_index("ix_task_deleted_at", table_name="task")
    op.drop_index("ix_task_created_by", table_name="task")
    op.drop_index("ix_task_assignor_id", table_name="task")
    op.drop_index("ix_task_parent_task_id", table_name="task")
    op.drop_table("task")
    _PRIORITY.drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_label_deleted_at", table_name="label")
    op.drop_table("label")
    op.drop_index("ix_status_deleted_at", table_name="status")
    op.drop_table("status")
    op.drop_index("ix_app_user_deleted_at", table_name="app_user")
    op.drop_table("app_user")
