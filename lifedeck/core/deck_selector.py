"""Deck Selector — composes today's bounded, ordered deck from a candidate pool.

Invariants:
    - Sweep runs first: expire stale cards, then wake elapsed snoozes, so a woken
      card is eligible in the same call
    - Only PENDING cards in the preferred domains are eligible (empty set = all domains)
    - Order: priority descending (urgent > high > medium > low), then created_at
      ascending, then id as a final stable tie-break
    - Deterministic and idempotent for the same pool, preferences, max_size and now

Design Decisions:
    - Deck is an immutable view (tuple) over cards it does not own
    - Sweep mutates cards in place through card_lifecycle: status changes are
      the shell's to persist, the report tells it which ids moved
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from lifedeck.core.calendar_days import require_aware
from lifedeck.core.card import Card, DEFAULT_CARD_TTL
from lifedeck.core.card_lifecycle import expire, is_expirable, is_wakeable, wake
from lifedeck.core.domain_types import CardId, CardStatus, LifeDomain, PRIORITY_RANK
from lifedeck.core.errors import InvalidArgumentError

DEFAULT_DECK_SIZE: int = 5


@dataclass(frozen=True)
class SweepReport:
    expired: tuple[CardId, ...] = ()
    woken: tuple[CardId, ...] = ()

    @property
    def changed(self) -> tuple[CardId, ...]:
        return self.expired + self.woken


@dataclass(frozen=True)
class Deck:
    """Today's ordered cards plus the instant the deck was built."""
    cards: tuple[Card, ...]
    built_at: datetime
    sweep: SweepReport = field(default_factory=SweepReport)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def card_ids(self) -> list[CardId]:
        return [c.id for c in self.cards]

    def find(self, card_id: CardId) -> Card | None:
        return next((c for c in self.cards if c.id == card_id), None)


def sweep_cards(
    pool: Iterable[Card], now: datetime, ttl: timedelta = DEFAULT_CARD_TTL,
) -> SweepReport:
    """Expire stale cards, then wake elapsed snoozes. Mutates cards in place."""
    require_aware(now, "now")
    expired: list[CardId] = []
    woken: list[CardId] = []
    for card in pool:
        if is_expirable(card, now, ttl):
            expire(card, now, ttl)
            expired.append(card.id)
        elif is_wakeable(card, now):
            wake(card, now)
            woken.append(card.id)
    return SweepReport(tuple(expired), tuple(woken))


def deck_sort_key(card: Card) -> tuple:
    return (-PRIORITY_RANK[card.priority], card.created_at, str(card.id))


def select_deck(
    pool: Iterable[Card],
    preferences: Iterable[LifeDomain],
    now: datetime,
    max_size: int = DEFAULT_DECK_SIZE,
    ttl: timedelta = DEFAULT_CARD_TTL,
) -> Deck:
    """Sweep the pool and return the first max_size eligible cards."""
    require_aware(now, "now")
    if max_size < 0:
        raise InvalidArgumentError(
            f"Deck size must be non-negative, got {max_size}.", "max_size",
        )
    cards = list(pool)
    report = sweep_cards(cards, now, ttl)

    wanted = {LifeDomain(d) for d in preferences} or set(LifeDomain)
    eligible = [
        c for c in cards
        if c.status == CardStatus.PENDING and c.domain in wanted
    ]
    eligible.sort(key=deck_sort_key)
    return Deck(tuple(eligible[:max_size]), now, report)


def cards_due(deck: Deck) -> int:
    """Pending cards still in the deck — polled by notification delivery."""
    return sum(1 for c in deck if c.status == CardStatus.PENDING)
