"""Achievements — static milestone definitions checked after each completion.

Invariants:
    - evaluate_achievements is PURE: returns newly met definitions, never mutates
    - An achievement unlocks at most once per user (unlocked_ids filters repeats)
    - Results come back in ACHIEVEMENTS order so bonus awarding is deterministic

Design Decisions:
    - Definitions as a tuple of frozen dataclasses: no DB table to seed, ids are stable
    - Time-of-day milestones read the completion instant's local hour
    - Consistency counts distinct local completion days; the caller derives them from
      the completed_at of the user's cards, so no separate activity log is stored
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from enum import Enum

from lifedeck.core.card import Card
from lifedeck.core.domain_types import CardStatus, LifeDomain
from lifedeck.core.progress import UserProgress

EARLY_BIRD_HOUR: int = 8
NIGHT_OWL_HOUR: int = 22
CONSISTENCY_DAYS: int = 14


class AchievementKind(str, Enum):
    STREAK = "streak"
    CARDS_COMPLETED = "cards_completed"
    SCORE_THRESHOLD = "score_threshold"
    CONSISTENCY = "consistency"
    EARLY_BIRD = "early_bird"
    NIGHT_OWL = "night_owl"


@dataclass(frozen=True)
class Achievement:
    id: str
    title: str
    description: str
    kind: AchievementKind
    bonus_points: int
    threshold: float = 0
    domain: LifeDomain | None = None


ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement("first_streak", "Getting Started", "Complete cards for 3 days in a row",
                AchievementKind.STREAK, 10, threshold=3),
    Achievement("week_warrior", "Week Warrior", "Maintain a 7-day streak",
                AchievementKind.STREAK, 25, threshold=7),
    Achievement("month_master", "Month Master", "Achieve a 30-day streak",
                AchievementKind.STREAK, 100, threshold=30),
    Achievement("century_club", "Century Club", "Reach a 100-day streak",
                AchievementKind.STREAK, 500, threshold=100),
    Achievement("card_collector", "Card Collector", "Complete 10 coaching cards",
                AchievementKind.CARDS_COMPLETED, 15, threshold=10),
    Achievement("habit_builder", "Habit Builder", "Complete 50 coaching cards",
                AchievementKind.CARDS_COMPLETED, 75, threshold=50),
    Achievement("life_optimizer", "Life Optimizer", "Complete 100 coaching cards",
                AchievementKind.CARDS_COMPLETED, 150, threshold=100),
    Achievement("health_hero", "Health Hero", "Achieve a health score of 80 or higher",
                AchievementKind.SCORE_THRESHOLD, 50, threshold=80,
                domain=LifeDomain.HEALTH),
    Achievement("finance_wizard", "Finance Wizard", "Achieve a finance score of 80 or higher",
                AchievementKind.SCORE_THRESHOLD, 50, threshold=80,
                domain=LifeDomain.FINANCE),
    Achievement("productivity_pro", "Productivity Pro",
                "Achieve a productivity score of 80 or higher",
                AchievementKind.SCORE_THRESHOLD, 50, threshold=80,
                domain=LifeDomain.PRODUCTIVITY),
    Achievement("mindfulness_master", "Mindfulness Master",
                "Achieve a mindfulness score of 80 or higher",
                AchievementKind.SCORE_THRESHOLD, 50, threshold=80,
                domain=LifeDomain.MINDFULNESS),
    Achievement("consistent_completer", "Consistent Completer",
                "Complete at least one card every day for 14 days",
                AchievementKind.CONSISTENCY, 40, threshold=CONSISTENCY_DAYS),
    Achievement("early_bird", "Early Bird", "Complete a card before 8 AM",
                AchievementKind.EARLY_BIRD, 5),
    Achievement("night_owl", "Night Owl", "Complete a card after 10 PM",
                AchievementKind.NIGHT_OWL, 5),
)


def completion_days(cards: Iterable[Card], tz: tzinfo) -> set[date]:
    """Local dates (in tz) on which any of cards was completed."""
    return {
        c.completed_at.astimezone(tz).date()
        for c in cards
        if c.status == CardStatus.COMPLETED and c.completed_at is not None
    }


def active_days_in_window(active_days: Iterable[date], today: date, window: int) -> int:
    """Distinct active days among the window days ending on today."""
    return sum(1 for d in set(active_days) if 0 <= (today - d).days < window)


def is_met(
    achievement: Achievement,
    progress: UserProgress,
    completed_at: datetime | None,
    active_days: Iterable[date] = (),
) -> bool:
    kind = achievement.kind
    if kind == AchievementKind.STREAK:
        return progress.current_streak >= achievement.threshold
    if kind == AchievementKind.CARDS_COMPLETED:
        return progress.total_cards_completed >= achievement.threshold
    if kind == AchievementKind.SCORE_THRESHOLD:
        return progress.score_for(achievement.domain) >= achievement.threshold
    if completed_at is None:
        return False
    if kind == AchievementKind.CONSISTENCY:
        window = int(achievement.threshold)
        return active_days_in_window(active_days, completed_at.date(), window) >= window
    if kind == AchievementKind.EARLY_BIRD:
        return completed_at.hour < EARLY_BIRD_HOUR
    return completed_at.hour >= NIGHT_OWL_HOUR


def evaluate_achievements(
    progress: UserProgress,
    unlocked_ids: Iterable[str],
    completed_at: datetime | None = None,
    active_days: Iterable[date] = (),
) -> list[Achievement]:
    """Definitions newly met by progress. Pure — caller records and awards them."""
    already = set(unlocked_ids)
    days = set(active_days)
    return [
        a for a in ACHIEVEMENTS
        if a.id not in already and is_met(a, progress, completed_at, days)
    ]


def award_bonus_points(progress: UserProgress, unlocked: Iterable[Achievement]) -> int:
    """Add each unlocked achievement's bonus to life points. Returns the total."""
    bonus = sum(a.bonus_points for a in unlocked)
    progress.life_points += bonus
    return bonus
