"""Card Entity — one action card and its validity rules.

Invariants:
    - status is PENDING at creation; completed_at, dismissed_at, snoozed_until unset
    - Once status leaves PENDING, exactly the timestamp matching the status is set
      (an EXPIRED card carries none of the three)
    - Cards are never deleted; terminal cards simply age out of future decks
    - Mutation happens only through core/card_lifecycle.py

Design Decisions:
    - Mutable dataclass, not frozen: the lifecycle applies transitions in place and
      the shell persists the same object (no copy-on-write bookkeeping)
    - action_type is carried for presentation only; nothing in core branches on it
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from lifedeck.core.calendar_days import require_aware
from lifedeck.core.domain_types import (
    ActionType, CardId, CardPriority, CardStatus, LifeDomain,
)
from lifedeck.core.errors import InvalidArgumentError

DEFAULT_CARD_TTL: timedelta = timedelta(days=7)

# status -> the one timestamp field that must be set for it
_STATUS_TIMESTAMP: dict[CardStatus, str] = {
    CardStatus.COMPLETED: "completed_at",
    CardStatus.DISMISSED: "dismissed_at",
    CardStatus.SNOOZED: "snoozed_until",
}
_TIMESTAMP_FIELDS: tuple[str, ...] = ("completed_at", "dismissed_at", "snoozed_until")


@dataclass
class Card:
    """Action card — pure dataclass, no IO."""

    id: CardId
    domain: LifeDomain
    title: str
    action_text: str
    created_at: datetime
    description: str = ""
    action_type: ActionType = ActionType.STANDARD
    priority: CardPriority = CardPriority.MEDIUM
    icon: str = ""
    tips: list[str] = field(default_factory=list)
    benefits: list[str] = field(default_factory=list)
    status: CardStatus = CardStatus.PENDING
    completed_at: datetime | None = None
    dismissed_at: datetime | None = None
    snoozed_until: datetime | None = None
    ai_generated: bool = False

    @classmethod
    def create(
        cls,
        *,
        domain: LifeDomain,
        title: str,
        action_text: str,
        now: datetime,
        card_id: CardId | None = None,
        description: str = "",
        action_type: ActionType = ActionType.STANDARD,
        priority: CardPriority = CardPriority.MEDIUM,
        icon: str = "",
        tips: list[str] | None = None,
        benefits: list[str] | None = None,
        ai_generated: bool = False,
    ) -> "Card":
        """Build a fresh PENDING card, validating field invariants."""
        require_aware(now, "created_at")
        if not title.strip():
            raise InvalidArgumentError("Card title cannot be empty.", "title")
        if not action_text.strip():
            raise InvalidArgumentError("Card action text cannot be empty.", "action_text")
        return cls(
            id=card_id or CardId(uuid.uuid4()),
            domain=LifeDomain(domain),
            title=title.strip(),
            action_text=action_text.strip(),
            created_at=now,
            description=description,
            action_type=ActionType(action_type),
            priority=CardPriority(priority),
            icon=icon,
            tips=list(tips or []),
            benefits=list(benefits or []),
            ai_generated=ai_generated,
        )

    @property
    def is_pending(self) -> bool:
        return self.status == CardStatus.PENDING

    @property
    def is_resolved(self) -> bool:
        """Completed, dismissed or expired — will never appear in a deck again."""
        return self.status in (
            CardStatus.COMPLETED, CardStatus.DISMISSED, CardStatus.EXPIRED,
        )

    def expires_at(self, ttl: timedelta = DEFAULT_CARD_TTL) -> datetime:
        return self.created_at + ttl

    def check_invariants(self) -> list[str]:
        """Return violated timestamp invariants (empty list when consistent)."""
        expected = _STATUS_TIMESTAMP.get(self.status)
        problems = []
        for name in _TIMESTAMP_FIELDS:
            is_set = getattr(self, name) is not None
            if name == expected and not is_set:
                problems.append(f"{self.status.value} card must set {name}")
            elif name != expected and is_set:
                problems.append(f"{self.status.value} card must not set {name}")
        return problems
