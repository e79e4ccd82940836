"""Progress Summary — pure dashboard statistics from UserProgress and today's deck.

Invariants:
    - All inputs come from UserProgress / Deck (no IO, no DB)
    - Returns a flat JSON-safe dict (Enums rendered as .value)
    - Never raises — a missing deck reports 0 cards due

Design Decisions:
    - Pure function, not a method on UserProgress: progress is scoring state,
      the summary is presentation
    - Strongest/weakest ties resolve by DOMAIN_ORDER (first domain wins)
"""

from lifedeck.core.deck_selector import Deck, cards_due
from lifedeck.core.domain_types import DOMAIN_ORDER
from lifedeck.core.progress import UserProgress


def compute_progress_summary(progress: UserProgress, deck: Deck | None = None) -> dict:
    """Compute dashboard statistics. Pure, no IO."""
    scores = progress.domain_scores
    # max/min return the first extreme in iteration order
    strongest = max(DOMAIN_ORDER, key=lambda d: scores[d])
    weakest = min(DOMAIN_ORDER, key=lambda d: scores[d])

    return {
        "life_score": round(progress.life_score, 2),
        "domain_scores": {d.value: scores[d] for d in DOMAIN_ORDER},
        "strongest_domain": strongest.value,
        "weakest_domain": weakest.value,
        "current_streak": progress.current_streak,
        "longest_streak": progress.longest_streak,
        "life_points": progress.life_points,
        "total_cards_completed": progress.total_cards_completed,
        "last_active_date": (
            progress.last_active_date.isoformat()
            if progress.last_active_date else None
        ),
        "cards_due": cards_due(deck) if deck is not None else 0,
    }
