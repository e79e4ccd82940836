"""Initial schema — cards, user_progress.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cards",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), nullable=False),
        sa.Column("domain", sa.String(20), nullable=False),
        sa.Column("action_type", sa.String(20), nullable=False, server_default="standard"),
        sa.Column("priority", sa.String(10), nullable=False, server_default="medium"),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("action_text", sa.String(500), nullable=False),
        sa.Column("icon", sa.String(100), nullable=False, server_default=""),
        sa.Column("tips", sa.JSON, nullable=False),
        sa.Column("benefits", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("dismissed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("snoozed_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("ai_generated", sa.Boolean, nullable=False, server_default="false"),
    )
    op.create_index("ix_cards_user_status", "cards", ["user_id", "status"])

    op.create_table(
        "user_progress",
        sa.Column("user_id", UUID(as_uuid=True), primary_key=True),
        sa.Column("health_score", sa.Float, nullable=False, server_default="0"),
        sa.Column("finance_score", sa.Float, nullable=False, server_default="0"),
        sa.Column("productivity_score", sa.Float, nullable=False, server_default="0"),
        sa.Column("mindfulness_score", sa.Float, nullable=False, server_default="0"),
        sa.Column("life_score", sa.Float, nullable=False, server_default="0"),
        sa.Column("current_streak", sa.Integer, nullable=False, server_default="0"),
        sa.Column("longest_streak", sa.Integer, nullable=False, server_default="0"),
        sa.Column("life_points", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_cards_completed", sa.Integer, nullable=False, server_default="0"),
        sa.Column("last_active_date", sa.Date, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("user_progress")
    op.drop_index("ix_cards_user_status", table_name="cards")
    op.drop_table("cards")
