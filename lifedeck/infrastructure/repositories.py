"""SQL Repositories — SQLAlchemy implementations of the core repository Protocols.

Invariants:
    - Rows map to core values through CardRecord / UserProgressRecord, so the DB
      path and the wire path share one validation contract
    - save() flushes; only SqlUnitOfWork.commit() commits, so a card status change
      and its progress update land in the same transaction
    - Datetimes are written as UTC instants and read back naive (SQLite) as UTC, so
      an instant survives a round trip whatever offset it was created with

Design Decisions:
    - One AsyncSession shared by all repositories of a unit of work
    - Upsert via session.get + attribute copy: portable across PostgreSQL and SQLite
"""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifedeck.core.card import Card
from lifedeck.core.domain_types import CardId, UserId
from lifedeck.core.progress import UserProgress
from lifedeck.models.card import CardModel
from lifedeck.models.unlocked_achievement import UnlockedAchievement
from lifedeck.models.user_progress import UserProgressModel
from lifedeck.schemas.card import CardRecord
from lifedeck.schemas.progress import UserProgressRecord

_CARD_COLUMNS: tuple[str, ...] = (
    "domain", "action_type", "priority", "title", "description", "action_text",
    "icon", "tips", "benefits", "status", "created_at", "completed_at",
    "dismissed_at", "snoozed_until", "ai_generated",
)
_PROGRESS_COLUMNS: tuple[str, ...] = (
    "health_score", "finance_score", "productivity_score", "mindfulness_score",
    "life_score", "current_streak", "longest_streak", "life_points",
    "total_cards_completed", "last_active_date",
)
_CARD_DATETIMES: tuple[str, ...] = (
    "created_at", "completed_at", "dismissed_at", "snoozed_until",
)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _column_value(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        # SQLite drops the offset on write; store the UTC instant
        return value.astimezone(timezone.utc)
    return value


def _column_values(record: dict) -> dict:
    return {k: _column_value(v) for k, v in record.items()}


def _card_from_row(row: CardModel) -> Card:
    data = {name: getattr(row, name) for name in _CARD_COLUMNS}
    for name in _CARD_DATETIMES:
        data[name] = _as_utc(data[name])
    return CardRecord(id=row.id, **data).to_card()


class SqlCardRepository:
    """CardRepository over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, card_id: CardId) -> Card | None:
        row = await self.db.get(CardModel, card_id)
        return _card_from_row(row) if row else None

    async def list_for_user(self, user_id: UserId) -> list[Card]:
        result = await self.db.execute(
            select(CardModel)
            .where(CardModel.user_id == user_id)
            .order_by(CardModel.created_at, CardModel.id)
        )
        return [_card_from_row(row) for row in result.scalars().all()]

    async def save(self, user_id: UserId, card: Card) -> None:
        record = _column_values(CardRecord.from_card(card).model_dump())
        row = await self.db.get(CardModel, card.id)
        if row is None:
            row = CardModel(id=card.id, user_id=user_id)
            self.db.add(row)
        for name in _CARD_COLUMNS:
            setattr(row, name, record[name])
        await self.db.flush()

    async def save_many(self, user_id: UserId, cards: list[Card]) -> None:
        for card in cards:
            await self.save(user_id, card)


class SqlProgressRepository:
    """ProgressRepository over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: UserId) -> UserProgress | None:
        row = await self.db.get(UserProgressModel, user_id)
        if row is None:
            return None
        data = {name: getattr(row, name) for name in _PROGRESS_COLUMNS}
        return UserProgressRecord(user_id=row.user_id, **data).to_progress()

    async def save(self, progress: UserProgress) -> None:
        record = UserProgressRecord.from_progress(progress).model_dump()
        row = await self.db.get(UserProgressModel, progress.user_id)
        if row is None:
            row = UserProgressModel(user_id=progress.user_id)
            self.db.add(row)
        for name in _PROGRESS_COLUMNS:
            setattr(row, name, record[name])
        await self.db.flush()


class SqlAchievementRepository:
    """AchievementRepository over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def unlocked_ids(self, user_id: UserId) -> set[str]:
        result = await self.db.execute(
            select(UnlockedAchievement.achievement_id)
            .where(UnlockedAchievement.user_id == user_id)
        )
        return set(result.scalars().all())

    async def record(
        self, user_id: UserId, achievement_id: str, unlocked_at: datetime,
    ) -> None:
        self.db.add(UnlockedAchievement(
            user_id=user_id, achievement_id=achievement_id,
            unlocked_at=unlocked_at.astimezone(timezone.utc),
        ))
        await self.db.flush()


class SqlUnitOfWork:
    """Bundles the SQL repositories over one session (implements UnitOfWork)."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.cards = SqlCardRepository(db)
        self.progress = SqlProgressRepository(db)
        self.achievements = SqlAchievementRepository(db)

    async def commit(self) -> None:
        await self.db.commit()
