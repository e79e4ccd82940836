"""UserProgress ORM — persists the per-user scoring aggregate.

Invariants:
    - One row per user (user_id primary key), created once at onboarding
    - life_score is denormalized for readers; writers always store the recomputed mean

Design Decisions:
    - last_active_date as Date, not DateTime: streaks are calendar-day math
"""

import uuid
from datetime import date

from sqlalchemy import Date, Float, Integer
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from lifedeck.db.base import Base


class UserProgressModel(Base):
    """Progress aggregate row."""
    __tablename__ = "user_progress"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    health_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    finance_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    productivity_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    mindfulness_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    life_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    current_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    longest_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    life_points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_cards_completed: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    last_active_date: Mapped[date | None] = mapped_column(Date, nullable=True)
