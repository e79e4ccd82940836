"""Card ORM — persists one action card verbatim.

Invariants:
    - id is the card's own UUID (assigned by core, not by the database)
    - status transitions: pending -> completed | dismissed | snoozed | expired,
      snoozed -> pending; enforced by core/card_lifecycle.py, not by the DB
    - Rows are never deleted

Design Decisions:
    - JSON columns for tips/benefits: short string lists, always read whole
    - Composite (user_id, status) index: deck building loads one user's live cards
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, JSON, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from lifedeck.db.base import Base


class CardModel(Base):
    """Action card row."""
    __tablename__ = "cards"
    __table_args__ = (
        Index("ix_cards_user_status", "user_id", "status"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    domain: Mapped[str] = mapped_column(String(20), nullable=False)
    action_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="standard",
    )
    priority: Mapped[str] = mapped_column(
        String(10), nullable=False, default="medium",
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    action_text: Mapped[str] = mapped_column(String(500), nullable=False)
    icon: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    tips: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    benefits: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    dismissed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    snoozed_until: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    ai_generated: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
