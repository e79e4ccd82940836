"""SQL repositories — values survive a write/read cycle through SQLite verbatim."""

import uuid
from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from lifedeck.core.card import Card
from lifedeck.core.card_lifecycle import snooze
from lifedeck.core.domain_types import (
    ActionType, CardPriority, CardStatus, LifeDomain,
)
from lifedeck.core.errors import DatabaseError
from lifedeck.core.progress import UserProgress
from lifedeck.infrastructure.database import DatabaseSessionManager
from lifedeck.infrastructure.repositories import SqlUnitOfWork

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


def _card(**kwargs) -> Card:
    return Card.create(
        domain=LifeDomain.MINDFULNESS,
        title="Box breathing",
        action_text="Breathe in a 4-4-4-4 pattern",
        now=NOW,
        action_type=ActionType.REFLECTION,
        priority=CardPriority.URGENT,
        tips=["Sit upright"],
        benefits=["Calm", "Focus"],
        **kwargs,
    )


async def test_card_written_then_read_in_fresh_session(test_session_factory):
    user_id = uuid.uuid4()
    card = _card()
    snooze(card, NOW + timedelta(hours=3), NOW)

    async with test_session_factory() as session:
        uow = SqlUnitOfWork(session)
        await uow.cards.save(user_id, card)
        await uow.commit()

    async with test_session_factory() as session:
        loaded = await SqlUnitOfWork(session).cards.get(card.id)

    assert loaded == card
    assert loaded.status == CardStatus.SNOOZED
    assert loaded.snoozed_until.tzinfo is not None


async def test_list_for_user_scopes_by_owner(uow):
    mine, theirs = uuid.uuid4(), uuid.uuid4()
    await uow.cards.save_many(mine, [_card(), _card()])
    await uow.cards.save(theirs, _card())
    await uow.commit()
    assert len(await uow.cards.list_for_user(mine)) == 2
    assert len(await uow.cards.list_for_user(theirs)) == 1


async def test_save_updates_existing_row(uow):
    user_id = uuid.uuid4()
    card = _card()
    await uow.cards.save(user_id, card)
    card.status = CardStatus.DISMISSED
    card.dismissed_at = NOW
    await uow.cards.save(user_id, card)
    await uow.commit()
    cards = await uow.cards.list_for_user(user_id)
    assert [c.status for c in cards] == [CardStatus.DISMISSED]


async def test_missing_card_is_none(uow):
    assert await uow.cards.get(uuid.uuid4()) is None


async def test_progress_written_then_read_in_fresh_session(test_session_factory):
    progress = UserProgress(
        user_id=uuid.uuid4(), health_score=12.5, mindfulness_score=70,
        current_streak=3, longest_streak=9, life_points=140,
        total_cards_completed=14, last_active_date=date(2026, 3, 9),
    )
    async with test_session_factory() as session:
        uow = SqlUnitOfWork(session)
        await uow.progress.save(progress)
        await uow.commit()

    async with test_session_factory() as session:
        loaded = await SqlUnitOfWork(session).progress.get(progress.user_id)

    assert loaded == progress
    assert loaded.life_score == progress.life_score


async def test_missing_progress_is_none(uow):
    assert await uow.progress.get(uuid.uuid4()) is None


async def test_achievement_unlocks_once_per_user(uow):
    user_id = uuid.uuid4()
    await uow.achievements.record(user_id, "first_streak", NOW)
    await uow.commit()
    assert await uow.achievements.unlocked_ids(user_id) == {"first_streak"}
    assert await uow.achievements.unlocked_ids(uuid.uuid4()) == set()
    with pytest.raises(IntegrityError):
        await uow.achievements.record(user_id, "first_streak", NOW)


# ─── session manager ─────────────────────────────────────────────

async def test_session_manager_health_check():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    try:
        assert await manager.health_check() is True
    finally:
        await manager.dispose()


async def test_session_manager_maps_integrity_error():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    try:
        with pytest.raises(DatabaseError) as exc:
            async with manager.session():
                raise IntegrityError("INSERT", {}, Exception("duplicate"))
        assert exc.value.operation == "commit"
        assert not exc.value.recoverable
    finally:
        await manager.dispose()


async def test_init_db_installs_singleton():
    import lifedeck.infrastructure.database as db_module

    original = db_module.db_manager
    try:
        manager = db_module.init_db("sqlite+aiosqlite:///:memory:")
        assert db_module.get_db_manager() is manager
        await manager.dispose()
        db_module.db_manager = None
        with pytest.raises(RuntimeError):
            db_module.get_db_manager()
    finally:
        db_module.db_manager = original


async def test_offset_timestamps_keep_their_instant(test_session_factory):
    plus_two = timezone(timedelta(hours=2))
    created = datetime(2026, 3, 10, 20, 0, tzinfo=plus_two)
    until = datetime(2026, 3, 11, 0, 0, tzinfo=plus_two)
    user_id = uuid.uuid4()
    card = Card.create(
        domain=LifeDomain.HEALTH, title="Walk", action_text="Walk 10 minutes",
        now=created,
    )
    snooze(card, until, created)

    async with test_session_factory() as session:
        uow = SqlUnitOfWork(session)
        await uow.cards.save(user_id, card)
        await uow.commit()

    async with test_session_factory() as session:
        loaded = await SqlUnitOfWork(session).cards.get(card.id)

    assert loaded.created_at == created
    assert loaded.snoozed_until == until
    assert loaded.snoozed_until == datetime(2026, 3, 10, 22, 0, tzinfo=timezone.utc)
