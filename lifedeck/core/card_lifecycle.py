"""Card Lifecycle — the state machine governing legal status transitions.

Invariants:
    - PENDING -> COMPLETED | DISMISSED | SNOOZED | EXPIRED
    - SNOOZED -> PENDING (wake, once now >= snoozed_until) | EXPIRED
    - COMPLETED, DISMISSED, EXPIRED are final
    - Illegal moves raise InvalidTransitionError BEFORE touching any field
    - Only complete/dismiss return a TransitionEvent; that return value is the single
      hand-off to scoring, so each terminal transition is scored at most once

Design Decisions:
    - Exceptions (not error dicts): callers are Python services, not a tool-result loop,
      and a raised InvalidTransitionError cannot be silently ignored
    - "now" is a parameter on every transition: the engine never reads a clock
    - Status check precedes argument check: a resolved card reports INVALID_TRANSITION
      even when the snooze deadline is also bad
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from lifedeck.core.calendar_days import require_aware
from lifedeck.core.card import Card, DEFAULT_CARD_TTL
from lifedeck.core.domain_types import (
    CardId, CardStatus, LifeDomain, Outcome, SwipeAction,
)
from lifedeck.core.errors import InvalidArgumentError, InvalidTransitionError


@dataclass(frozen=True)
class TransitionEvent:
    """Terminal transition forwarded to the scoring engine exactly once."""
    card_id: CardId
    domain: LifeDomain
    outcome: Outcome
    occurred_at: datetime


# --- User-driven transitions --------------------------------------------------

def complete(card: Card, now: datetime) -> TransitionEvent:
    """PENDING -> COMPLETED. Returns the event to score."""
    _require_status(card, "complete", CardStatus.PENDING)
    require_aware(now, "now")
    card.status = CardStatus.COMPLETED
    card.completed_at = now
    return TransitionEvent(card.id, card.domain, Outcome.COMPLETED, now)


def dismiss(card: Card, now: datetime) -> TransitionEvent:
    """PENDING -> DISMISSED. Neutral for scoring, but still a terminal event."""
    _require_status(card, "dismiss", CardStatus.PENDING)
    require_aware(now, "now")
    card.status = CardStatus.DISMISSED
    card.dismissed_at = now
    return TransitionEvent(card.id, card.domain, Outcome.DISMISSED, now)


def snooze(card: Card, until: datetime, now: datetime) -> None:
    """PENDING -> SNOOZED until a strictly future deadline."""
    _require_status(card, "snooze", CardStatus.PENDING)
    require_aware(now, "now")
    require_aware(until, "until")
    if until <= now:
        raise InvalidArgumentError(
            f"Snooze deadline {until.isoformat()} must be after {now.isoformat()}.",
            "until",
        )
    card.status = CardStatus.SNOOZED
    card.snoozed_until = until


# --- System-driven transitions ------------------------------------------------

def is_expirable(
    card: Card, now: datetime, ttl: timedelta = DEFAULT_CARD_TTL,
) -> bool:
    """Pending past its expiry deadline, or snoozed past both deadlines."""
    if now < card.expires_at(ttl):
        return False
    if card.status == CardStatus.PENDING:
        return True
    return card.status == CardStatus.SNOOZED and is_wakeable(card, now)


def is_wakeable(card: Card, now: datetime) -> bool:
    return (
        card.status == CardStatus.SNOOZED
        and card.snoozed_until is not None
        and now >= card.snoozed_until
    )


def expire(card: Card, now: datetime, ttl: timedelta = DEFAULT_CARD_TTL) -> None:
    """PENDING | elapsed SNOOZED -> EXPIRED. Clears any snooze deadline."""
    require_aware(now, "now")
    if not is_expirable(card, now, ttl):
        raise InvalidTransitionError(str(card.id), card.status.value, "expire")
    card.status = CardStatus.EXPIRED
    card.snoozed_until = None


def wake(card: Card, now: datetime) -> None:
    """SNOOZED -> PENDING once the snooze deadline has elapsed."""
    require_aware(now, "now")
    if not is_wakeable(card, now):
        raise InvalidTransitionError(str(card.id), card.status.value, "wake")
    card.status = CardStatus.PENDING
    card.snoozed_until = None


# --- Gesture application ------------------------------------------------------

def apply_swipe(
    card: Card,
    action: SwipeAction,
    now: datetime,
    snooze_until: datetime | None = None,
) -> TransitionEvent | None:
    """Apply an interpreted swipe. RESET and SNOOZE yield no scoring event."""
    if action == SwipeAction.COMPLETE:
        return complete(card, now)
    if action == SwipeAction.DISMISS:
        return dismiss(card, now)
    if action == SwipeAction.SNOOZE:
        if snooze_until is None:
            raise InvalidArgumentError("Snooze swipe requires a deadline.", "until")
        snooze(card, snooze_until, now)
    return None


# --- Helper -------------------------------------------------------------------

def _require_status(card: Card, action: str, allowed: CardStatus) -> None:
    if card.status != allowed:
        raise InvalidTransitionError(str(card.id), card.status.value, action)
