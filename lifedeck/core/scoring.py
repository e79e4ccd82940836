"""Scoring & Streak Engine — folds terminal transition events into UserProgress.

Invariants:
    - Called exactly once per TransitionEvent (the lifecycle's legality check is the
      at-most-once guard; this module does no de-duplication of its own)
    - COMPLETED: domain score += increment (clamped), total_cards_completed += 1,
      life_points += award, streak advanced against last_active_date
    - DISMISSED: no change at all; dismissal is neutral, never punitive
    - Never raises on valid input: all arithmetic is clamped and total

Design Decisions:
    - Streak math lives in advance_streak (pure over ints and dates) so it can be
      reasoned about without a UserProgress
    - Completion date is event.occurred_at's local date; the clock that produced it
      decides the user's calendar
    - A completion dated before last_active_date (late delivery) still scores but
      leaves the streak and last_active_date untouched
"""

from dataclasses import dataclass
from datetime import date

from lifedeck.core.calendar_days import days_between
from lifedeck.core.card_lifecycle import TransitionEvent
from lifedeck.core.domain_types import LifeDomain, Outcome
from lifedeck.core.progress import UserProgress

SCORE_INCREMENT: float = 2.0
COMPLETION_POINTS: int = 10


@dataclass(frozen=True)
class ScoringRules:
    score_increment: float = SCORE_INCREMENT
    completion_points: int = COMPLETION_POINTS


@dataclass(frozen=True)
class ScoreUpdate:
    """What one event changed — for logging and UI feedback."""
    domain: LifeDomain
    outcome: Outcome
    score_delta: float = 0.0
    points_awarded: int = 0
    streak_before: int = 0
    streak_after: int = 0

    @property
    def streak_extended(self) -> bool:
        return self.streak_after > self.streak_before


def advance_streak(
    current: int, last_active: date | None, activity_day: date,
) -> int:
    """Streak after activity on activity_day.

    Same day keeps the streak, the next day extends it, anything else
    (a gap of 2+ days, or no prior activity) restarts at 1.
    """
    if last_active is None:
        return 1
    gap = days_between(last_active, activity_day)
    if gap == 0:
        return current
    if gap == 1:
        return current + 1
    return 1


def apply_outcome(
    progress: UserProgress,
    event: TransitionEvent,
    rules: ScoringRules = ScoringRules(),
) -> ScoreUpdate:
    """Apply one terminal event to progress. Mutates progress in place."""
    streak_before = progress.current_streak
    if event.outcome != Outcome.COMPLETED:
        return ScoreUpdate(
            event.domain, event.outcome,
            streak_before=streak_before, streak_after=streak_before,
        )

    before = progress.score_for(event.domain)
    after = progress.set_domain_score(event.domain, before + rules.score_increment)
    progress.total_cards_completed += 1
    progress.life_points += rules.completion_points

    activity_day = event.occurred_at.date()
    last_active = progress.last_active_date
    if last_active is None or activity_day >= last_active:
        progress.current_streak = advance_streak(
            progress.current_streak, last_active, activity_day,
        )
        progress.longest_streak = max(progress.longest_streak, progress.current_streak)
        progress.last_active_date = activity_day

    return ScoreUpdate(
        event.domain,
        event.outcome,
        score_delta=after - before,
        points_awarded=rules.completion_points,
        streak_before=streak_before,
        streak_after=progress.current_streak,
    )
