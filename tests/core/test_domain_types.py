"""Domain Types — verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - Enums have expected members and serialize to string
    - PRIORITY_RANK orders urgent > high > medium > low
"""

from uuid import uuid4

from lifedeck.core.domain_types import (
    CardId, UserId, DomainScore,
    LifeDomain, ActionType, CardPriority, CardStatus, Outcome, SwipeAction,
    PRIORITY_RANK, DOMAIN_ORDER,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert CardId(uid) == uid
    assert UserId(uid) == uid


def test_value_types_wrap_float():
    assert DomainScore(42.5) == 42.5


def test_life_domain_has_four_domains():
    assert {d.value for d in LifeDomain} == {
        "health", "finance", "productivity", "mindfulness",
    }


def test_domain_order_covers_every_domain_once():
    assert len(DOMAIN_ORDER) == 4
    assert set(DOMAIN_ORDER) == set(LifeDomain)


def test_action_type_has_five_tags():
    assert len(ActionType) == 5


def test_card_status_has_five_states():
    assert set(CardStatus) == {
        CardStatus.PENDING,
        CardStatus.COMPLETED,
        CardStatus.DISMISSED,
        CardStatus.SNOOZED,
        CardStatus.EXPIRED,
    }


def test_only_completed_and_dismissed_are_scoring_outcomes():
    assert {o.value for o in Outcome} == {"completed", "dismissed"}


def test_swipe_actions():
    assert {a.value for a in SwipeAction} == {"complete", "dismiss", "snooze", "reset"}


def test_priority_rank_orders_urgent_first():
    ranked = sorted(CardPriority, key=lambda p: -PRIORITY_RANK[p])
    assert ranked == [
        CardPriority.URGENT, CardPriority.HIGH,
        CardPriority.MEDIUM, CardPriority.LOW,
    ]


def test_enums_serialize_to_string():
    assert CardStatus.PENDING.value == "pending"
    assert LifeDomain("finance") is LifeDomain.FINANCE
