"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CardId and UserId wrap UUIDs — never use bare UUID in domain logic
    - Domain scores are bounded 0.0–100.0
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (persisted shape is JSON-like)
    - PRIORITY_RANK lives next to CardPriority: single source of truth for deck ordering
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CardId = NewType("CardId", UUID)
UserId = NewType("UserId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

DomainScore = NewType("DomainScore", float)   # 0.0–100.0

MIN_SCORE: float = 0.0
MAX_SCORE: float = 100.0


# ─── Enums ───────────────────────────────────────────────────────

class LifeDomain(str, Enum):
    """The four life categories a card belongs to and a score tracks."""
    HEALTH = "health"
    FINANCE = "finance"
    PRODUCTIVITY = "productivity"
    MINDFULNESS = "mindfulness"


class ActionType(str, Enum):
    """UI affordance tag only — never consulted by lifecycle or scoring."""
    QUICK = "quick"
    STANDARD = "standard"
    EXTENDED = "extended"
    HABIT = "habit"
    REFLECTION = "reflection"


class CardPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class CardStatus(str, Enum):
    """Card lifecycle states — maps to DB `status` column."""
    PENDING = "pending"
    COMPLETED = "completed"
    DISMISSED = "dismissed"
    SNOOZED = "snoozed"
    EXPIRED = "expired"


class Outcome(str, Enum):
    """Outcomes forwarded to scoring. Snoozed/expired never reach the engine."""
    COMPLETED = "completed"
    DISMISSED = "dismissed"


class SwipeAction(str, Enum):
    """Result of interpreting a drag gesture."""
    COMPLETE = "complete"
    DISMISS = "dismiss"
    SNOOZE = "snooze"
    RESET = "reset"


PRIORITY_RANK: dict[CardPriority, int] = {
    CardPriority.URGENT: 3,
    CardPriority.HIGH: 2,
    CardPriority.MEDIUM: 1,
    CardPriority.LOW: 0,
}

# Fixed domain order: drives UserProgress field layout and summary tie-breaks
DOMAIN_ORDER: tuple[LifeDomain, ...] = (
    LifeDomain.HEALTH,
    LifeDomain.FINANCE,
    LifeDomain.PRODUCTIVITY,
    LifeDomain.MINDFULNESS,
)
