"""Card Entity — creation defaults, field validation, timestamp invariant.

Tests cover:
    - Card.create starts PENDING with no status timestamps
    - Empty title / action text and naive datetimes rejected
    - check_invariants flags mismatched timestamps
"""

from datetime import datetime, timedelta

import pytest

from lifedeck.core.card import Card, DEFAULT_CARD_TTL
from lifedeck.core.domain_types import ActionType, CardPriority, CardStatus, LifeDomain
from lifedeck.core.errors import InvalidArgumentError


def test_new_card_is_pending_without_timestamps(make_card):
    card = make_card()
    assert card.status == CardStatus.PENDING
    assert card.completed_at is None
    assert card.dismissed_at is None
    assert card.snoozed_until is None
    assert card.check_invariants() == []


def test_create_applies_defaults(now):
    card = Card.create(
        domain=LifeDomain.FINANCE, title="  Budget  ", action_text="Check spending",
        now=now,
    )
    assert card.title == "Budget"
    assert card.action_type == ActionType.STANDARD
    assert card.priority == CardPriority.MEDIUM
    assert card.created_at == now
    assert card.ai_generated is False
    assert card.tips == []


def test_create_accepts_string_enums(now):
    card = Card.create(
        domain="mindfulness", title="Breathe", action_text="Breathe",
        priority="urgent", action_type="habit", now=now,
    )
    assert card.domain is LifeDomain.MINDFULNESS
    assert card.priority is CardPriority.URGENT
    assert card.action_type is ActionType.HABIT


def test_create_rejects_blank_title(now):
    with pytest.raises(InvalidArgumentError) as exc:
        Card.create(domain=LifeDomain.HEALTH, title="   ", action_text="x", now=now)
    assert exc.value.field == "title"


def test_create_rejects_blank_action_text(now):
    with pytest.raises(InvalidArgumentError) as exc:
        Card.create(domain=LifeDomain.HEALTH, title="Walk", action_text="", now=now)
    assert exc.value.field == "action_text"


def test_create_rejects_naive_datetime():
    with pytest.raises(InvalidArgumentError):
        Card.create(
            domain=LifeDomain.HEALTH, title="Walk", action_text="Walk",
            now=datetime(2026, 3, 10, 12, 0),
        )


def test_expires_at_uses_ttl(make_card, now):
    card = make_card(created_at=now)
    assert card.expires_at() == now + DEFAULT_CARD_TTL
    assert card.expires_at(timedelta(days=1)) == now + timedelta(days=1)


def test_check_invariants_flags_missing_timestamp(make_card):
    card = make_card()
    card.status = CardStatus.COMPLETED
    assert card.check_invariants() == ["completed card must set completed_at"]


def test_check_invariants_flags_extra_timestamp(make_card, now):
    card = make_card()
    card.status = CardStatus.DISMISSED
    card.dismissed_at = now
    card.snoozed_until = now + timedelta(hours=2)
    assert card.check_invariants() == ["dismissed card must not set snoozed_until"]


def test_is_resolved_only_for_final_states(make_card):
    card = make_card()
    assert not card.is_resolved
    card.status = CardStatus.EXPIRED
    assert card.is_resolved
