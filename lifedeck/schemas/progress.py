"""Progress Schemas — the persisted UserProgress record.

Invariants:
    - Domain scores validated to 0–100 on the way in
    - lifeScore is written out for readers but IGNORED on the way in: it is always
      recomputed from the domain scores
    - longestStreak >= currentStreak enforced at the boundary

Design Decisions:
    - Same camelCase contract as CardRecord (alias_generator=to_camel)
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from lifedeck.core.domain_types import UserId
from lifedeck.core.progress import UserProgress


class UserProgressRecord(BaseModel):
    """UserProgress{userId, healthScore, ..., lastActiveDate?}."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: UUID
    health_score: float = Field(0.0, ge=0, le=100)
    finance_score: float = Field(0.0, ge=0, le=100)
    productivity_score: float = Field(0.0, ge=0, le=100)
    mindfulness_score: float = Field(0.0, ge=0, le=100)
    life_score: float | None = None
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)
    life_points: int = Field(0, ge=0)
    total_cards_completed: int = Field(0, ge=0)
    last_active_date: date | None = None

    @model_validator(mode="after")
    def check_streaks(self) -> "UserProgressRecord":
        if self.longest_streak < self.current_streak:
            raise ValueError("longestStreak must be >= currentStreak")
        return self

    @classmethod
    def from_progress(cls, progress: UserProgress) -> "UserProgressRecord":
        return cls(
            user_id=progress.user_id,
            health_score=progress.health_score,
            finance_score=progress.finance_score,
            productivity_score=progress.productivity_score,
            mindfulness_score=progress.mindfulness_score,
            life_score=progress.life_score,
            current_streak=progress.current_streak,
            longest_streak=progress.longest_streak,
            life_points=progress.life_points,
            total_cards_completed=progress.total_cards_completed,
            last_active_date=progress.last_active_date,
        )

    def to_progress(self) -> UserProgress:
        return UserProgress(
            user_id=UserId(self.user_id),
            health_score=self.health_score,
            finance_score=self.finance_score,
            productivity_score=self.productivity_score,
            mindfulness_score=self.mindfulness_score,
            current_streak=self.current_streak,
            longest_streak=self.longest_streak,
            life_points=self.life_points,
            total_cards_completed=self.total_cards_completed,
            last_active_date=self.last_active_date,
        )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
