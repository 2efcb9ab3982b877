"""Initial migration: create titlesession and titleidea tables

Revision ID: 001_title_tables
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "001_title_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create titlesession table
    op.create_table(
        "titlesession",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("content_type", sa.String(), nullable=True),
        sa.Column("working_title", sa.String(), nullable=True),
        sa.Column("topic", sa.String(), nullable=True),
        sa.Column("target_audience", sa.String(), nullable=True),
        sa.Column("language", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_titlesession_user_id", "titlesession", ["user_id"])

    # Create titleidea table
    op.create_table(
        "titleidea",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("session_id", sa.String(), nullable=False),
        sa.Column("title_text", sa.String(), nullable=False),
        sa.Column("tone", sa.String(), nullable=True),
        sa.Column("style", sa.String(), nullable=True),
        sa.Column("is_favorite", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_selected", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["session_id"], ["titlesession.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_titleidea_session_id", "titleidea", ["session_id"])


def downgrade() -> None:
    op.drop_index("ix_titleidea_session_id", table_name="titleidea")
    op.drop_table("titleidea")
    op.drop_index("ix_titlesession_user_id", table_name="titlesession")
    op.drop_table("titlesession")
