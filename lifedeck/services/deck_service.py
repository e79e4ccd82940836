"""Deck Service — per-user orchestration of deck building, gestures and scoring.

Invariants:
    - Every mutating call runs inside UserLockRegistry.hold(user_id): load, apply the
      pure core, save and commit happen as one serialized step
    - A terminal TransitionEvent is scored in the same lock scope and the same commit
      as the card status change that produced it
    - Core errors (InvalidTransition, InvalidArgument, CardNotFound) are logged and
      re-raised untouched; the caller decides UI behaviour

Design Decisions:
    - Impureim sandwich: repositories in, pure core in the middle, repositories out
    - Cards are looked up in the user's own pool, so another user's card id is NOT FOUND
    - now is read once per call from the injected Clock and threaded through the core
    - All services share default_locks unless a caller injects a registry, so two
      services over two sessions still serialize the same user
    - open_deck_service is the shell entry point: one managed session, one unit of
      work, one service
"""

import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime

from lifedeck.config import Settings, get_settings
from lifedeck.core.achievements import (
    Achievement, award_bonus_points, completion_days, evaluate_achievements,
)
from lifedeck.core.card import Card
from lifedeck.core.card_lifecycle import (
    TransitionEvent, apply_swipe, complete, dismiss, snooze,
)
from lifedeck.core.deck_selector import (
    Deck, SweepReport, cards_due, select_deck, sweep_cards,
)
from lifedeck.core.domain_types import CardId, LifeDomain, UserId
from lifedeck.core.errors import (
    CardNotFoundError, InvalidArgumentError, LifeDeckError, ProgressNotFoundError,
)
from lifedeck.core.gesture import SwipeDecision, interpret_swipe
from lifedeck.core.progress import UserProgress
from lifedeck.core.progress_summary import compute_progress_summary
from lifedeck.core.repository_protocols import Clock, UnitOfWork
from lifedeck.core.scoring import ScoreUpdate, apply_outcome
from lifedeck.infrastructure.database import get_db_manager
from lifedeck.infrastructure.repositories import SqlUnitOfWork
from lifedeck.services.user_locks import UserLockRegistry, default_locks

logger = logging.getLogger(__name__)


@dataclass
class TransitionResult:
    """What one user action did to a card and to progress."""
    card: Card
    event: TransitionEvent | None = None
    score: ScoreUpdate | None = None
    unlocked: list[Achievement] = field(default_factory=list)
    decision: SwipeDecision | None = None


class DeckService:
    """Card lifecycle and progress operations for one persistence unit of work."""

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Clock,
        settings: Settings | None = None,
        locks: UserLockRegistry | None = None,
    ):
        self.uow = uow
        self.clock = clock
        self.settings = settings or get_settings()
        self.locks = locks or default_locks

    # --- Onboarding -----------------------------------------------------------

    async def start_progress(
        self, user_id: UserId, initial_scores: dict[LifeDomain, float] | None = None,
    ) -> UserProgress:
        """Create progress once; later calls return the existing record."""
        async with self.locks.hold(user_id):
            existing = await self.uow.progress.get(user_id)
            if existing is not None:
                return existing
            progress = UserProgress.create(user_id, initial_scores)
            await self.uow.progress.save(progress)
            await self.uow.commit()
            logger.info("Progress created", extra={"user_id": str(user_id)})
            return progress

    async def add_cards(self, user_id: UserId, cards: Iterable[Card]) -> list[Card]:
        """Store candidate cards from the catalog or a generator."""
        cards = list(cards)
        for card in cards:
            problems = card.check_invariants()
            if problems:
                raise InvalidArgumentError("; ".join(problems), "status")
        async with self.locks.hold(user_id):
            await self.uow.cards.save_many(user_id, cards)
            await self.uow.commit()
        logger.info(
            f"Added {len(cards)} card(s) to pool", extra={"user_id": str(user_id)},
        )
        return cards

    # --- Deck -----------------------------------------------------------------

    async def build_deck(
        self, user_id: UserId, preferences: Iterable[LifeDomain] = (),
    ) -> Deck:
        """Sweep the user's pool and select today's deck."""
        async with self.locks.hold(user_id):
            now = self.clock.now()
            pool = await self.uow.cards.list_for_user(user_id)
            deck = select_deck(
                pool, preferences, now,
                max_size=self.settings.deck_max_size, ttl=self.settings.card_ttl,
            )
            await self._persist_sweep(user_id, pool, deck.sweep)
            return deck

    async def sweep(self, user_id: UserId) -> SweepReport:
        """Timer-driven expire/wake pass without building a deck."""
        async with self.locks.hold(user_id):
            now = self.clock.now()
            pool = await self.uow.cards.list_for_user(user_id)
            report = sweep_cards(pool, now, self.settings.card_ttl)
            await self._persist_sweep(user_id, pool, report)
            return report

    async def cards_due(
        self, user_id: UserId, preferences: Iterable[LifeDomain] = (),
    ) -> int:
        return cards_due(await self.build_deck(user_id, preferences))

    async def progress_summary(
        self, user_id: UserId, preferences: Iterable[LifeDomain] = (),
    ) -> dict:
        deck = await self.build_deck(user_id, preferences)
        progress = await self._require_progress(user_id)
        return compute_progress_summary(progress, deck)

    # --- Transitions ----------------------------------------------------------

    async def handle_swipe(
        self, user_id: UserId, card_id: CardId, dx: float, dy: float,
    ) -> TransitionResult:
        """Interpret a drag and apply the resulting transition."""
        async with self.locks.hold(user_id):
            now = self.clock.now()
            decision = interpret_swipe(dx, dy, now, self.settings.swipe_threshold)
            card = await self._require_card(user_id, card_id)
            if decision.is_reset:
                return TransitionResult(card=card, decision=decision)
            result = await self._apply(
                user_id, card, decision.action.value,
                lambda c: apply_swipe(c, decision.action, now, decision.snooze_until),
                now,
            )
            result.decision = decision
            return result

    async def complete_card(self, user_id: UserId, card_id: CardId) -> TransitionResult:
        async with self.locks.hold(user_id):
            now = self.clock.now()
            card = await self._require_card(user_id, card_id)
            return await self._apply(
                user_id, card, "complete", lambda c: complete(c, now), now,
            )

    async def dismiss_card(self, user_id: UserId, card_id: CardId) -> TransitionResult:
        async with self.locks.hold(user_id):
            now = self.clock.now()
            card = await self._require_card(user_id, card_id)
            return await self._apply(
                user_id, card, "dismiss", lambda c: dismiss(c, now), now,
            )

    async def snooze_card(
        self, user_id: UserId, card_id: CardId, until: datetime,
    ) -> TransitionResult:
        async with self.locks.hold(user_id):
            now = self.clock.now()
            card = await self._require_card(user_id, card_id)
            return await self._apply(
                user_id, card, "snooze", lambda c: snooze(c, until, now), now,
            )

    # --- Helpers --------------------------------------------------------------

    async def _apply(self, user_id, card, transition, move, now) -> TransitionResult:
        """Run one lifecycle move, score it if terminal, persist, commit."""
        log_extra = {
            "user_id": str(user_id), "card_id": str(card.id), "transition": transition,
        }
        try:
            event = move(card)
        except LifeDeckError as e:
            logger.warning(
                f"Transition rejected: {e.message}",
                extra={**log_extra, "error_code": e.code},
            )
            raise

        result = TransitionResult(card=card, event=event)
        if event is not None:
            progress = await self._require_progress(user_id)
            result.score = apply_outcome(progress, event, self.settings.scoring_rules())
            if self.settings.achievements_enabled:
                result.unlocked = await self._unlock_achievements(
                    user_id, progress, event, now,
                )
            await self.uow.progress.save(progress)

        await self.uow.cards.save(user_id, card)
        await self.uow.commit()
        logger.info(
            f"Card {card.status.value}",
            extra={
                **log_extra,
                "domain": card.domain.value,
                "points_awarded": result.score.points_awarded if result.score else None,
                "streak": result.score.streak_after if result.score else None,
            },
        )
        return result

    async def _unlock_achievements(
        self, user_id: UserId, progress: UserProgress,
        event: TransitionEvent, now: datetime,
    ) -> list[Achievement]:
        unlocked_ids = await self.uow.achievements.unlocked_ids(user_id)
        pool = await self.uow.cards.list_for_user(user_id)
        active_days = completion_days(pool, event.occurred_at.tzinfo)
        active_days.add(event.occurred_at.date())
        unlocked = evaluate_achievements(
            progress, unlocked_ids, event.occurred_at, active_days,
        )
        for achievement in unlocked:
            await self.uow.achievements.record(user_id, achievement.id, now)
        award_bonus_points(progress, unlocked)
        if unlocked:
            logger.info(
                f"Unlocked {[a.id for a in unlocked]}",
                extra={"user_id": str(user_id)},
            )
        return unlocked

    async def _persist_sweep(
        self, user_id: UserId, pool: list[Card], report: SweepReport,
    ) -> None:
        changed = set(report.changed)
        if not changed:
            return
        await self.uow.cards.save_many(user_id, [c for c in pool if c.id in changed])
        await self.uow.commit()
        logger.info(
            f"Sweep expired {len(report.expired)}, woke {len(report.woken)}",
            extra={"user_id": str(user_id)},
        )

    async def _require_card(self, user_id: UserId, card_id: CardId) -> Card:
        pool = await self.uow.cards.list_for_user(user_id)
        card = next((c for c in pool if c.id == card_id), None)
        if card is None:
            logger.info(
                "Card not found",
                extra={"user_id": str(user_id), "card_id": str(card_id)},
            )
            raise CardNotFoundError(str(card_id))
        return card

    async def _require_progress(self, user_id: UserId) -> UserProgress:
        progress = await self.uow.progress.get(user_id)
        if progress is None:
            raise ProgressNotFoundError(str(user_id))
        return progress


@asynccontextmanager
async def open_deck_service(
    clock: Clock, settings: Settings | None = None,
) -> AsyncIterator[DeckService]:
    """DeckService over a fresh session from the process-wide db_manager."""
    async with get_db_manager().session() as db:
        yield DeckService(SqlUnitOfWork(db), clock, settings, default_locks)
