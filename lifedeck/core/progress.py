"""User Progress — per-user aggregate read and written by the scoring engine.

Invariants:
    - Domain scores are clamped to 0.0–100.0
    - life_score is the arithmetic mean of the four domain scores, derived on read,
      so it can never drift from them
    - longest_streak >= current_streak, and longest_streak never decreases
    - Created once at onboarding, never recreated

Design Decisions:
    - One attribute per domain (health_score, ...) mirrors the persisted record shape;
      score_for / set_domain_score give domain-keyed access without a string switch
"""

from dataclasses import dataclass
from datetime import date

from lifedeck.core.domain_types import (
    DOMAIN_ORDER, LifeDomain, MAX_SCORE, MIN_SCORE, UserId,
)

_SCORE_FIELDS: dict[LifeDomain, str] = {
    LifeDomain.HEALTH: "health_score",
    LifeDomain.FINANCE: "finance_score",
    LifeDomain.PRODUCTIVITY: "productivity_score",
    LifeDomain.MINDFULNESS: "mindfulness_score",
}


def clamp_score(value: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, float(value)))


@dataclass
class UserProgress:
    """Per-user progress aggregate — pure dataclass, no IO."""

    user_id: UserId
    health_score: float = 0.0
    finance_score: float = 0.0
    productivity_score: float = 0.0
    mindfulness_score: float = 0.0
    current_streak: int = 0
    longest_streak: int = 0
    life_points: int = 0
    total_cards_completed: int = 0
    last_active_date: date | None = None

    def __post_init__(self) -> None:
        for domain in DOMAIN_ORDER:
            self.set_domain_score(domain, self.score_for(domain))
        self.longest_streak = max(self.longest_streak, self.current_streak)

    @classmethod
    def create(
        cls, user_id: UserId, initial_scores: dict[LifeDomain, float] | None = None,
    ) -> "UserProgress":
        """Seed progress at onboarding completion."""
        progress = cls(user_id=user_id)
        for domain, value in (initial_scores or {}).items():
            progress.set_domain_score(LifeDomain(domain), value)
        return progress

    @property
    def life_score(self) -> float:
        return sum(self.domain_scores.values()) / len(DOMAIN_ORDER)

    @property
    def domain_scores(self) -> dict[LifeDomain, float]:
        return {d: self.score_for(d) for d in DOMAIN_ORDER}

    def score_for(self, domain: LifeDomain) -> float:
        return getattr(self, _SCORE_FIELDS[domain])

    def set_domain_score(self, domain: LifeDomain, value: float) -> float:
        """Clamp and store one domain score. Returns the stored value."""
        clamped = clamp_score(value)
        setattr(self, _SCORE_FIELDS[domain], clamped)
        return clamped
