"""Record schemas — wire shape and boundary validation."""

import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from lifedeck.core.card import Card
from lifedeck.core.domain_types import CardStatus, LifeDomain
from lifedeck.core.progress import UserProgress
from lifedeck.schemas.card import CardRecord
from lifedeck.schemas.progress import UserProgressRecord

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


def _wire_card(**overrides) -> dict:
    data = {
        "id": str(uuid.uuid4()),
        "domain": "health",
        "actionType": "quick",
        "priority": "high",
        "title": "Stand up",
        "actionText": "Stand and stretch for a minute",
        "createdAt": "2026-03-10T12:00:00+00:00",
    }
    data.update(overrides)
    return data


# ─── CardRecord ──────────────────────────────────────────────────

def test_card_record_accepts_camel_case():
    card = CardRecord.model_validate(_wire_card()).to_card()
    assert card.domain == LifeDomain.HEALTH
    assert card.action_text == "Stand and stretch for a minute"
    assert card.status == CardStatus.PENDING


def test_card_record_wire_shape_is_camel_case():
    card = Card.create(
        domain=LifeDomain.FINANCE, title="Budget", action_text="Set a weekly budget",
        now=NOW,
    )
    wire = CardRecord.from_card(card).to_wire()
    assert wire["actionText"] == "Set a weekly budget"
    assert wire["aiGenerated"] is False
    assert wire["snoozedUntil"] is None
    assert wire["status"] == "pending"


def test_card_record_rejects_status_timestamp_mismatch():
    with pytest.raises(ValidationError, match="completed card must set completed_at"):
        CardRecord.model_validate(_wire_card(status="completed"))


def test_card_record_rejects_stray_timestamp():
    with pytest.raises(ValidationError):
        CardRecord.model_validate(
            _wire_card(status="dismissed", dismissedAt="2026-03-10T13:00:00+00:00",
                       snoozedUntil="2026-03-11T00:00:00+00:00"),
        )


def test_card_record_rejects_naive_timestamps():
    with pytest.raises(ValidationError):
        CardRecord.model_validate(_wire_card(createdAt="2026-03-10T12:00:00"))


def test_card_record_rejects_unknown_domain():
    with pytest.raises(ValidationError):
        CardRecord.model_validate(_wire_card(domain="social"))


def test_card_record_rejects_blank_title():
    with pytest.raises(ValidationError):
        CardRecord.model_validate(_wire_card(title=""))


# ─── UserProgressRecord ──────────────────────────────────────────

def test_progress_record_recomputes_life_score():
    record = UserProgressRecord.model_validate({
        "userId": str(uuid.uuid4()),
        "healthScore": 40, "financeScore": 40,
        "productivityScore": 40, "mindfulnessScore": 40,
        "lifeScore": 99,
    })
    assert record.to_progress().life_score == 40


def test_progress_record_writes_life_score():
    progress = UserProgress(user_id=uuid.uuid4(), health_score=20)
    wire = UserProgressRecord.from_progress(progress).to_wire()
    assert wire["lifeScore"] == 5
    assert wire["lastActiveDate"] is None


def test_progress_record_rejects_out_of_range_score():
    with pytest.raises(ValidationError):
        UserProgressRecord(user_id=uuid.uuid4(), health_score=101)


def test_progress_record_rejects_longest_below_current():
    with pytest.raises(ValidationError, match="longestStreak"):
        UserProgressRecord(user_id=uuid.uuid4(), current_streak=5, longest_streak=3)
