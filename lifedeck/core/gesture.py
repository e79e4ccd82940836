"""Gesture Interpreter — maps a drag-end vector to a lifecycle request.

Invariants:
    - interpret_swipe is PURE: returns a decision, never touches a Card
    - Rules evaluated in order, first match wins:
        1. |dx| > T and dx > 0  -> COMPLETE
        2. |dx| > T and dx <= 0 -> DISMISS
        3. dy > T (downward)    -> SNOOZE until the start of the next day
        4. otherwise            -> RESET (animate back to rest)
    - Exactly-at-threshold drags reset (strict comparison)

Design Decisions:
    - Horizontal intent beats vertical: a diagonal fling past T on both axes completes
      or dismisses, never snoozes
    - SWIPE_THRESHOLD (100.0) is the default; the shell passes Settings.swipe_threshold
"""

from dataclasses import dataclass
from datetime import datetime

from lifedeck.core.calendar_days import start_of_next_day
from lifedeck.core.domain_types import SwipeAction
from lifedeck.core.errors import InvalidArgumentError

SWIPE_THRESHOLD: float = 100.0


@dataclass(frozen=True)
class SwipeDecision:
    action: SwipeAction
    snooze_until: datetime | None = None

    @property
    def is_reset(self) -> bool:
        return self.action == SwipeAction.RESET


def interpret_swipe(
    dx: float, dy: float, now: datetime, threshold: float = SWIPE_THRESHOLD,
) -> SwipeDecision:
    """Interpret a drag at release. Pure — no state mutation."""
    if threshold < 0:
        raise InvalidArgumentError(
            f"Swipe threshold must be non-negative, got {threshold}.", "threshold",
        )

    if abs(dx) > threshold:
        if dx > 0:
            return SwipeDecision(SwipeAction.COMPLETE)
        return SwipeDecision(SwipeAction.DISMISS)

    if dy > threshold:
        return SwipeDecision(SwipeAction.SNOOZE, start_of_next_day(now))

    return SwipeDecision(SwipeAction.RESET)
