"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Persistence stores and loads values verbatim (read-after-write within one transition)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in repository Protocols: implementations do IO, but the core functions
      that operate on the loaded values are never async themselves
    - Clock is synchronous: reading "now" is not IO, and tests pass a fixed instant
"""

from datetime import datetime
from typing import Protocol

from lifedeck.core.card import Card
from lifedeck.core.domain_types import CardId, UserId
from lifedeck.core.progress import UserProgress


class Clock(Protocol):
    """Supplies "now" (timezone-aware) for deadlines and streak date math."""
    def now(self) -> datetime: ...


class CardRepository(Protocol):
    """Contract for card persistence — implemented by shell."""
    async def get(self, card_id: CardId) -> Card | None: ...
    async def list_for_user(self, user_id: UserId) -> list[Card]: ...
    async def save(self, user_id: UserId, card: Card) -> None: ...
    async def save_many(self, user_id: UserId, cards: list[Card]) -> None: ...


class ProgressRepository(Protocol):
    """Contract for UserProgress persistence — implemented by shell."""
    async def get(self, user_id: UserId) -> UserProgress | None: ...
    async def save(self, progress: UserProgress) -> None: ...


class AchievementRepository(Protocol):
    """Contract for unlocked-achievement persistence — implemented by shell."""
    async def unlocked_ids(self, user_id: UserId) -> set[str]: ...
    async def record(
        self, user_id: UserId, achievement_id: str, unlocked_at: datetime,
    ) -> None: ...


class UnitOfWork(Protocol):
    """Repositories sharing one transaction; commit() makes a transition durable."""
    cards: CardRepository
    progress: ProgressRepository
    achievements: AchievementRepository

    async def commit(self) -> None: ...
