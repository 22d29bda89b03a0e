"""Initial schema

Revision ID: 3f6a9c1d2b7e
Revises:
Create Date: 2025-11-03 10:12:44.518203

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f6a9c1d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _owner_column() -> sa.Column:
    return sa.Column(
        "user_id",
        sa.String(length=36),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("last_login_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "resumes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(
            "user_id",
            sa.String(length=36),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("prompt", sa.Text(), nullable=True),
        sa.Column(
            "resume",
            postgresql.JSONB(astext_type=sa.Text()).with_variant(sa.JSON(), "sqlite"),
            nullable=False,
        ),
        sa.Column("is_public", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_resumes_id"), "resumes", ["id"], unique=False)
    op.create_index(op.f("ix_resumes_user_id"), "resumes", ["user_id"], unique=False)

    op.create_table(
        "anonymous_prompts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("prompt", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_anonymous_prompts_id"), "anonymous_prompts", ["id"], unique=False)
    op.create_index(
        op.f("ix_anonymous_prompts_created_at"),
        "anonymous_prompts",
        ["created_at"],
        unique=False,
    )

    life_data_tables = {
        "user_experiences": [
            sa.Column("title", sa.String(), nullable=True),
            sa.Column("company", sa.String(), nullable=True),
            sa.Column("period", sa.String(), nullable=True),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("updated_at", sa.DateTime(), nullable=False),
        ],
        "user_education": [
            sa.Column("degree", sa.String(), nullable=True),
            sa.Column("institution", sa.String(), nullable=True),
            sa.Column("period", sa.String(), nullable=True),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("updated_at", sa.DateTime(), nullable=False),
        ],
        "user_certifications": [
            sa.Column("name", sa.String(), nullable=True),
            sa.Column("issuer", sa.String(), nullable=True),
            sa.Column("date", sa.String(), nullable=True),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("updated_at", sa.DateTime(), nullable=False),
        ],
        "user_skills": [sa.Column("skill", sa.String(), nullable=False)],
        "user_hobbies": [sa.Column("hobby", sa.String(), nullable=False)],
    }
    for table_name, columns in life_data_tables.items():
        op.create_table(
            table_name,
            sa.Column("id", sa.Integer(), nullable=False),
            _owner_column(),
            sa.Column("created_at", sa.DateTime(), nullable=False),
            *columns,
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(op.f(f"ix_{table_name}_id"), table_name, ["id"], unique=False)
        op.create_index(op.f(f"ix_{table_name}_user_id"), table_name, ["user_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    for table_name in (
        "user_hobbies",
        "user_skills",
        "user_certifications",
        "user_education",
        "user_experiences",
    ):
        op.drop_index(op.f(f"ix_{table_name}_user_id"), table_name=table_name)
        op.drop_index(op.f(f"ix_{table_name}_id"), table_name=table_name)
        op.drop_table(table_name)

    op.drop_index(op.f("ix_anonymous_prompts_created_at"), table_name="anonymous_prompts")
    op.drop_index(op.f("ix_anonymous_prompts_id"), table_name="anonymous_prompts")
    op.drop_table("anonymous_prompts")

    op.drop_index(op.f("ix_resumes_user_id"), table_name="resumes")
    op.drop_index(op.f("ix_resumes_id"), table_name="resumes")
    op.drop_table("resumes")

    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
